"""Contracts for the external collaborators consulted by the decision engine"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Protocol

from loan_gateway.domain.models import ScoreResult


class IdentityVerifier(ABC):
    """Confirms an applicant's identity"""

    @abstractmethod
    def initialize(self) -> None:
        """One-time setup before the first validation"""

    @abstractmethod
    def validate(self, applicant_name: str, applicant_age: int, applicant_address: str) -> bool:
        """Return True when the identity could be confirmed"""


class CreditScorer(ABC):
    """Computes a creditworthiness score and publishes it through score_result"""

    @abstractmethod
    def calculate_score(self, applicant_name: str, applicant_address: str) -> None:
        """
        Compute and store a score for the applicant.

        Raises:
            CreditScoringError (or any other exception) when scoring fails
        """

    @property
    @abstractmethod
    def score_result(self) -> ScoreResult:
        """Result of the most recent calculation"""


class Clock(Protocol):
    def now(self) -> datetime: ...


class IdentityTransport(Protocol):
    def call_service(self, applicant_name: str, applicant_age: int, applicant_address: str) -> bool: ...
