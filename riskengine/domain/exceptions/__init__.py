"""Domain Exceptions - Input errors and unknown catalog categories."""

from .base import DomainException
from .catalog import UnknownCategoryException
from .loan import InvalidLoanTermsException

__all__ = [
    "DomainException",
    "InvalidLoanTermsException",
    "UnknownCategoryException",
]
