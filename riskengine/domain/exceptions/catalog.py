"""Catalog lookup exceptions."""

from .base import DomainException


class UnknownCategoryException(DomainException):
    """Raised when a check type, flag type or alert type is not in its catalog."""

    def __init__(self, kind: str, value: object):
        super().__init__(
            message=f"Unknown {kind}: {value!r}",
            code="UNKNOWN_CATEGORY",
        )
        self.kind = kind
        self.value = value
