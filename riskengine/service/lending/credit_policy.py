"""
Credit Decision Policy.

Evaluates an applicant against three floors, in a fixed order, and sizes
the credit limit from a tier determined by the preferred thresholds:

1. Credit score floor
2. Debt-to-income ceiling
3. Income floor

The first failing check is the only reason reported. Declines are normal
results, never exceptions.
"""

import math

from riskengine.domain.entities import CreditDecision, CreditProfile, CreditTier
from .settings import CreditPolicySettings, credit_policy_settings

REASON_LOW_CREDIT_SCORE = "Credit score below minimum requirement"
REASON_HIGH_DTI = "Debt-to-income ratio too high"
REASON_LOW_INCOME = "Annual income below minimum requirement"
REASON_APPROVED = "Application meets all criteria"


def make_credit_decision(
    credit_score: int,
    debt_to_income_percent: float,
    annual_income: float,
    settings: CreditPolicySettings = credit_policy_settings,
) -> CreditDecision:
    """
    Decide whether to approve an application and at what limit.

    Limit tiers:
        - preferred score AND preferred DTI: min(income * 0.50, 50,000)
        - preferred score OR preferred DTI: min(income * 0.30, 25,000)
        - otherwise: min(income * 0.20, 10,000)

    Args:
        credit_score: Bureau score (300-850)
        debt_to_income_percent: Debt-to-income ratio as a percentage
        annual_income: Gross annual income
        settings: Policy settings (uses defaults if not provided)

    Returns:
        CreditDecision; limit is rounded down to a multiple of 100
    """
    if credit_score < settings.min_credit_score:
        return CreditDecision(approved=False, reason=REASON_LOW_CREDIT_SCORE)

    if debt_to_income_percent > settings.max_dti_percent:
        return CreditDecision(approved=False, reason=REASON_HIGH_DTI)

    if annual_income < settings.min_annual_income:
        return CreditDecision(approved=False, reason=REASON_LOW_INCOME)

    tier = classify_tier(credit_score, debt_to_income_percent, settings)
    limit = calculate_limit(annual_income, tier, settings)

    return CreditDecision(
        approved=True,
        reason=REASON_APPROVED,
        limit=limit,
        tier=tier,
    )


def decide_credit(
    profile: CreditProfile,
    settings: CreditPolicySettings = credit_policy_settings,
) -> CreditDecision:
    """Apply the credit policy to a CreditProfile record."""
    return make_credit_decision(
        credit_score=profile.credit_score,
        debt_to_income_percent=profile.debt_to_income_percent,
        annual_income=profile.annual_income,
        settings=settings,
    )


def classify_tier(
    credit_score: int,
    debt_to_income_percent: float,
    settings: CreditPolicySettings = credit_policy_settings,
) -> CreditTier:
    """
    Determine the limit tier for an application that passed every floor.

    Args:
        credit_score: Bureau score
        debt_to_income_percent: DTI as a percentage
        settings: Policy settings (uses defaults if not provided)

    Returns:
        EXCELLENT when both preferred thresholds are met, GOOD when one is,
        ACCEPTABLE otherwise
    """
    preferred_score = credit_score >= settings.preferred_credit_score
    preferred_dti = debt_to_income_percent <= settings.preferred_dti_percent

    if preferred_score and preferred_dti:
        return CreditTier.EXCELLENT
    elif preferred_score or preferred_dti:
        return CreditTier.GOOD
    else:
        return CreditTier.ACCEPTABLE


def calculate_limit(
    annual_income: float,
    tier: CreditTier,
    settings: CreditPolicySettings = credit_policy_settings,
) -> int:
    """
    Size the credit limit for a tier.

    Args:
        annual_income: Gross annual income
        tier: Tier from classify_tier()
        settings: Policy settings (uses defaults if not provided)

    Returns:
        Limit rounded down to a multiple of settings.limit_rounding_unit
    """
    if tier == CreditTier.EXCELLENT:
        multiplier, cap = settings.excellent_income_multiplier, settings.excellent_limit_cap
    elif tier == CreditTier.GOOD:
        multiplier, cap = settings.good_income_multiplier, settings.good_limit_cap
    else:
        multiplier, cap = settings.acceptable_income_multiplier, settings.acceptable_limit_cap

    raw_limit = min(annual_income * multiplier, cap)
    unit = settings.limit_rounding_unit
    return int(math.floor(raw_limit / unit)) * unit


def calculate_dti(monthly_debt: float, monthly_income: float) -> float:
    """
    Calculate the debt-to-income ratio as a percentage.

    Args:
        monthly_debt: Total monthly debt obligations
        monthly_income: Gross monthly income

    Returns:
        DTI percentage. No debt gives 0.0; debt with no income gives infinity.
    """
    if monthly_debt <= 0:
        return 0.0
    if monthly_income <= 0:
        return float("inf")
    return monthly_debt / monthly_income * 100


def explain_credit_decision(
    decision: CreditDecision,
    profile: CreditProfile,
    settings: CreditPolicySettings = credit_policy_settings,
) -> str:
    """
    Generate a human-readable explanation of a credit decision.

    Args:
        decision: The decision to explain
        profile: The profile the decision was made for
        settings: Policy settings the decision was made with

    Returns:
        Multi-line explanation string
    """
    lines = []

    if not decision.approved:
        lines.append("Decision: DECLINED")
    else:
        lines.append(f"Decision: APPROVED (${decision.limit:,} limit, {decision.tier.value} tier)")

    lines.append(f"Reason: {decision.reason}")
    lines.append("")
    lines.append("Contributing Factors:")

    score = profile.credit_score
    if score < settings.min_credit_score:
        lines.append(f"  - Credit score: {score} (below minimum {settings.min_credit_score})")
    elif score < settings.preferred_credit_score:
        lines.append(f"  - Credit score: {score} (acceptable)")
    else:
        lines.append(f"  - Credit score: {score} (preferred)")

    dti = profile.debt_to_income_percent
    if dti > settings.max_dti_percent:
        lines.append(f"  - Debt-to-income: {dti:.1f}% (above maximum {settings.max_dti_percent:g}%)")
    elif dti > settings.preferred_dti_percent:
        lines.append(f"  - Debt-to-income: {dti:.1f}% (acceptable)")
    else:
        lines.append(f"  - Debt-to-income: {dti:.1f}% (preferred)")

    income = profile.annual_income
    if income < settings.min_annual_income:
        lines.append(f"  - Annual income: ${income:,.0f} (below minimum ${settings.min_annual_income:,.0f})")
    else:
        lines.append(f"  - Annual income: ${income:,.0f}")

    return "\n".join(lines)
