"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidApplicationError(DomainException, ValueError):
    """No loan application was supplied for processing"""

    pass


class InvalidLoanValueError(DomainException, ValueError):
    """A loan value object was built from malformed input"""

    pass


class IdentityServiceError(DomainException):
    """Identity verification service returned an error or is unavailable"""

    pass


class CreditScoringError(DomainException):
    """Credit score could not be calculated"""

    pass
