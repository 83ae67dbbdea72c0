"""Domain models - pure Python dataclasses representing business entities"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Union

from loan_gateway.domain.exceptions import InvalidLoanValueError

CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True)
class LoanAmount:
    """Requested principal in a given currency"""

    currency_code: str
    amount: Union[int, Decimal]

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        code = (self.currency_code or "").strip().upper()
        if not CURRENCY_CODE_PATTERN.match(code):
            raise InvalidLoanValueError(f"Invalid currency code: {self.currency_code!r}")
        object.__setattr__(self, "currency_code", code)


@dataclass(frozen=True)
class LoanProduct:
    """Loan product reference data"""

    product_id: int
    name: str
    interest_rate: Decimal


class IdentityVerificationStatus(str, Enum):
    """Outcome of an identity check"""

    NOT_CHECKED = "not_checked"
    VERIFIED = "verified"
    FAILED = "failed"


class DeclineReason(str, Enum):
    """Why an application was declined (logs and metrics only)"""

    LOW_SALARY = "low_salary"
    IDENTITY_NOT_VERIFIED = "identity_not_verified"
    SCORING_ERROR = "scoring_error"
    LOW_CREDIT_SCORE = "low_credit_score"


@dataclass
class ScoreValue:
    """Numeric creditworthiness score"""

    score: int


@dataclass
class ScoreResult:
    """Read model published by a credit scorer after calculation"""

    score_value: ScoreValue
    access_count: int = 0


@dataclass
class LoanApplication:
    """
    Single loan application, the unit of work for the decision engine.

    The acceptance flag starts out declined. Only the decision engine flips
    it, through accept() / decline().
    """

    application_id: int
    product: LoanProduct
    amount: LoanAmount
    applicant_name: str
    applicant_age: int
    applicant_address: str
    applicant_salary: Union[int, Decimal]
    _is_accepted: bool = field(default=False, init=False, repr=False)

    @property
    def is_accepted(self) -> bool:
        return self._is_accepted

    def get_is_accepted(self) -> bool:
        return self._is_accepted

    def accept(self) -> None:
        self._is_accepted = True

    def decline(self) -> None:
        self._is_accepted = False
