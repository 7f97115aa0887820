"""
Credit Card Offers.

Picks a card tier from the applicant's credit score and draws the limit
and APR from that tier's bands:

    score >= 740  -> premium  (10,000-24,999 limit, 11.99-16.98% APR, 2% cash back)
    score >= 670  -> standard (3,000-9,999 limit, 14.99-21.98% APR, 1.5% cash back)
    otherwise     -> secured  (500 limit, 17.99-22.98% APR, 1% cash back)
"""

import random
from typing import Optional

from riskengine.domain.entities import CardOffer, CardTier
from .settings import CardPolicySettings, card_policy_settings


def classify_card_tier(
    credit_score: int,
    settings: CardPolicySettings = card_policy_settings,
) -> CardTier:
    """Card product for a credit score."""
    if credit_score >= settings.premium_min_credit_score:
        return CardTier.PREMIUM
    elif credit_score >= settings.standard_min_credit_score:
        return CardTier.STANDARD
    else:
        return CardTier.SECURED


def draw_apr(apr_min: float, apr_max: float, rng: random.Random) -> float:
    """APR in [apr_min, apr_max) on a 0.01 grid; apr_min when the band is empty."""
    low, high = round(apr_min * 100), round(apr_max * 100)
    if high <= low:
        return apr_min
    return rng.randrange(low, high) / 100


def draw_limit(limit_min: int, limit_max: int, rng: random.Random) -> int:
    if limit_max <= limit_min:
        return limit_min
    return rng.randrange(limit_min, limit_max)


def price_card(
    credit_score: int,
    rng: Optional[random.Random] = None,
    settings: CardPolicySettings = card_policy_settings,
) -> CardOffer:
    """
    Price a credit card for an applicant.

    Args:
        credit_score: Applicant's bureau score
        rng: Injected generator for the limit and APR draws (fresh one if omitted)
        settings: Card settings (uses defaults if not provided)

    Returns:
        CardOffer whose limit and APR lie inside the tier's bands
    """
    rng = rng or random.Random()
    tier = classify_card_tier(credit_score, settings)

    if tier == CardTier.PREMIUM:
        limit = draw_limit(settings.premium_limit_min, settings.premium_limit_max, rng)
        apr = draw_apr(settings.premium_apr_min, settings.premium_apr_max, rng)
        cash_back = settings.premium_cash_back_percent
    elif tier == CardTier.STANDARD:
        limit = draw_limit(settings.standard_limit_min, settings.standard_limit_max, rng)
        apr = draw_apr(settings.standard_apr_min, settings.standard_apr_max, rng)
        cash_back = settings.standard_cash_back_percent
    else:
        limit = settings.secured_credit_limit
        apr = draw_apr(settings.secured_apr_min, settings.secured_apr_max, rng)
        cash_back = settings.secured_cash_back_percent

    return CardOffer(
        tier=tier,
        credit_limit=limit,
        apr_percent=apr,
        cash_back_percent=cash_back,
    )
