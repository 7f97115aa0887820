"""Loan-related domain exceptions."""

from typing import List

from .base import DomainException


class InvalidLoanTermsException(DomainException):
    """Raised when loan terms cannot produce an amortization schedule."""

    def __init__(self, errors: List[str]):
        super().__init__(
            message="Invalid loan terms: " + "; ".join(errors),
            code="INVALID_LOAN_TERMS",
        )
        self.errors = list(errors)
