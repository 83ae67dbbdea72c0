"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Callable
from unittest.mock import Mock
from loan_gateway.domain.collaborators import CreditScorer, IdentityVerifier
from loan_gateway.domain.decisioning import DecisionPolicy, LoanApplicationProcessor
from loan_gateway.domain.models import LoanAmount, LoanApplication, LoanProduct, ScoreResult, ScoreValue

SARAH_NAME = "Sarah"
SARAH_AGE = 25
SARAH_ADDRESS = "133 Pluralsight Drive, Draper, Utah"


def _build_application(salary: int = 65_000, application_id: int = 42) -> LoanApplication:
    return LoanApplication(
        application_id=application_id,
        product=LoanProduct(99, "Loan", Decimal("5.25")),
        amount=LoanAmount("USD", 200_000),
        applicant_name=SARAH_NAME,
        applicant_age=SARAH_AGE,
        applicant_address=SARAH_ADDRESS,
        applicant_salary=salary,
    )


@pytest.fixture
def make_application() -> Callable[..., LoanApplication]:
    """Factory for the reference application used throughout the suite"""
    return _build_application


@pytest.fixture
def application() -> LoanApplication:
    """Application that clears the salary gate exactly (65,000)"""
    return _build_application()


@pytest.fixture
def low_salary_application() -> LoanApplication:
    """Application one below the salary gate (64,999)"""
    return _build_application(salary=64_999)


@pytest.fixture
def identity_verifier() -> Mock:
    """Identity verifier that confirms every applicant"""
    verifier = Mock(spec=IdentityVerifier)
    verifier.validate.return_value = True
    return verifier


@pytest.fixture
def score_result() -> ScoreResult:
    return ScoreResult(score_value=ScoreValue(score=300))


@pytest.fixture
def credit_scorer(score_result: ScoreResult) -> Mock:
    """Credit scorer publishing a score of 300"""
    scorer = Mock(spec=CreditScorer)
    scorer.score_result = score_result
    return scorer


@pytest.fixture
def processor(identity_verifier: Mock, credit_scorer: Mock) -> LoanApplicationProcessor:
    return LoanApplicationProcessor(identity_verifier, credit_scorer, policy=DecisionPolicy())
