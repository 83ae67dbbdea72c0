"""Loan application decision engine - core business logic for accept/decline"""

import logging
import threading
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from loan_gateway.config import Settings, settings
from loan_gateway.domain.collaborators import CreditScorer, IdentityVerifier
from loan_gateway.domain.exceptions import InvalidApplicationError
from loan_gateway.domain.models import DeclineReason, LoanApplication
from loan_gateway.infrastructure.observability.logging import log_decision
from loan_gateway.infrastructure.observability.metrics import credit_score_failures_counter, record_decision

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecisionPolicy:
    """
    Acceptance thresholds. Both are inclusive:
    - salary >= min_salary passes the salary gate (65,000 passes, 64,999 fails)
    - score >= min_credit_score is accepted
    """

    min_salary: Union[int, Decimal] = 65_000
    min_credit_score: int = 300

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "DecisionPolicy":
        return cls(min_salary=config.min_salary, min_credit_score=config.min_credit_score)


@dataclass
class ScoringOutcome:
    """Result of asking the credit scorer to calculate a score"""

    succeeded: bool
    error: Optional[Exception] = None


class LoanApplicationProcessor:
    """Decides whether a single loan application is accepted"""

    def __init__(
        self,
        identity_verifier: IdentityVerifier,
        credit_scorer: CreditScorer,
        policy: Optional[DecisionPolicy] = None,
    ):
        self._identity_verifier = identity_verifier
        self._credit_scorer = credit_scorer
        self._policy = policy or DecisionPolicy.from_settings()
        self._init_lock = threading.Lock()
        self._verifier_initialized = False

    @property
    def policy(self) -> DecisionPolicy:
        return self._policy

    def process(self, application: Optional[LoanApplication]) -> None:
        """
        Accept or decline `application` in place.

        Flow:
        1. Decline low salaries without touching any collaborator
        2. Initialize the identity verifier (once per processor)
        3. Validate identity, decline if not confirmed
        4. Calculate credit score, decline if the scorer fails
        5. Accept when the score meets the threshold

        Raises:
            InvalidApplicationError: application is None
        """
        if application is None:
            raise InvalidApplicationError("application must not be None")

        start_time = time.time()
        reason = self._decide(application)

        if reason is None:
            application.accept()
        else:
            application.decline()

        duration_ms = (time.time() - start_time) * 1000
        record_decision(application.is_accepted, reason)
        log_decision(application.application_id, application.is_accepted, reason, duration_ms)

    def _decide(self, application: LoanApplication) -> Optional[DeclineReason]:
        """Return the decline reason, or None when the application is accepted"""
        if application.applicant_salary < self._policy.min_salary:
            return DeclineReason.LOW_SALARY

        self._ensure_verifier_initialized()

        identity_confirmed = self._identity_verifier.validate(
            application.applicant_name,
            application.applicant_age,
            application.applicant_address,
        )
        if not identity_confirmed:
            return DeclineReason.IDENTITY_NOT_VERIFIED

        outcome = self._calculate_score(application)
        if not outcome.succeeded:
            return DeclineReason.SCORING_ERROR

        score_result = self._credit_scorer.score_result
        score = score_result.score_value.score
        score_result.access_count += 1

        if score < self._policy.min_credit_score:
            return DeclineReason.LOW_CREDIT_SCORE
        return None

    def _ensure_verifier_initialized(self) -> None:
        if self._verifier_initialized:
            return
        with self._init_lock:
            if not self._verifier_initialized:
                self._identity_verifier.initialize()
                self._verifier_initialized = True

    def _calculate_score(self, application: LoanApplication) -> ScoringOutcome:
        try:
            self._credit_scorer.calculate_score(application.applicant_name, application.applicant_address)
        except Exception as e:
            credit_score_failures_counter.inc()
            logger.warning(
                f"Credit score calculation failed: {e}",
                extra={"application_id": application.application_id, "step": "credit_score"},
            )
            return ScoringOutcome(succeeded=False, error=e)
        return ScoringOutcome(succeeded=True)
