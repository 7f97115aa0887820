"""Credit card offer entities."""

from dataclasses import dataclass
from enum import Enum


class CardTier(str, Enum):
    """Card product chosen from the applicant's credit score."""
    PREMIUM = "premium"
    STANDARD = "standard"
    SECURED = "secured"


@dataclass(frozen=True)
class CardOffer:
    """
    A priced credit card.

    Attributes:
        tier: premium / standard / secured
        credit_limit: Spending limit in whole currency units
        apr_percent: Annual percentage rate, two decimals (e.g. 14.99)
        cash_back_percent: Cash back on purchases, in percent
    """

    tier: CardTier
    credit_limit: int
    apr_percent: float
    cash_back_percent: float

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.value,
            "credit_limit": self.credit_limit,
            "apr_percent": self.apr_percent,
            "cash_back_percent": self.cash_back_percent,
        }
