"""Credit profile and credit decision entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CreditTier(str, Enum):
    """Profile quality band that determines the approved limit."""
    EXCELLENT = "excellent"    # preferred score and preferred DTI
    GOOD = "good"              # one of the two
    ACCEPTABLE = "acceptable"  # passed the floors only


@dataclass(frozen=True)
class CreditProfile:
    """
    Applicant attributes used by the credit policy.

    Attributes:
        credit_score: Bureau score (300-850)
        debt_to_income_percent: Monthly debt as a percentage of monthly income
        annual_income: Gross annual income
    """

    credit_score: int
    debt_to_income_percent: float
    annual_income: float


@dataclass(frozen=True)
class CreditDecision:
    """
    The approve/deny outcome of the credit policy.

    Attributes:
        approved: Whether the application passed every policy check
        reason: Human-readable explanation (the first failing check when declined)
        limit: Approved limit, a multiple of 100 (None if declined)
        tier: Profile tier used to size the limit (None if declined)
    """

    approved: bool
    reason: str
    limit: Optional[int] = None
    tier: Optional[CreditTier] = None

    def to_dict(self) -> dict:
        return {
            "approved": self.approved,
            "reason": self.reason,
            "limit": self.limit,
            "tier": self.tier.value if self.tier else None,
        }
