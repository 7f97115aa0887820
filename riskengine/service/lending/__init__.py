"""
Lending Module - amortization, credit policy, loan pricing and card offers
"""

from .settings import (
    CardPolicySettings,
    CreditPolicySettings,
    LoanPricingSettings,
    card_policy_settings,
    credit_policy_settings,
    loan_pricing_settings,
)
from .amortization import (
    amortize,
    build_schedule,
    calculate_monthly_payment,
    calculate_total_interest,
)
from .credit_policy import (
    calculate_dti,
    calculate_limit,
    classify_tier,
    decide_credit,
    explain_credit_decision,
    make_credit_decision,
)
from .pricing import calculate_annual_rate, lookup_base_rate, price_loan
from .cards import classify_card_tier, draw_apr, draw_limit, price_card

__all__ = [
    # Settings
    "CardPolicySettings",
    "CreditPolicySettings",
    "LoanPricingSettings",
    "card_policy_settings",
    "credit_policy_settings",
    "loan_pricing_settings",
    # Amortization
    "amortize",
    "build_schedule",
    "calculate_monthly_payment",
    "calculate_total_interest",
    # Credit Policy
    "calculate_dti",
    "calculate_limit",
    "classify_tier",
    "decide_credit",
    "explain_credit_decision",
    "make_credit_decision",
    # Pricing
    "calculate_annual_rate",
    "lookup_base_rate",
    "price_loan",
    # Cards
    "classify_card_tier",
    "draw_apr",
    "draw_limit",
    "price_card",
]
