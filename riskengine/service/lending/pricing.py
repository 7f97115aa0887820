"""
Loan Pricing.

Maps an applicant's credit score and the loan product to an annual rate
and origination fee, then builds the amortization schedule for the
priced loan.
"""

from datetime import date
from typing import Union

from riskengine.domain.entities import LoanOffer, LoanTerms, LoanType
from riskengine.domain.exceptions import UnknownCategoryException
from .amortization import amortize
from .settings import LoanPricingSettings, loan_pricing_settings


def resolve_loan_type(loan_type: Union[LoanType, str]) -> LoanType:
    """Coerce a loan type name to LoanType, raising for unknown products."""
    try:
        return LoanType(loan_type)
    except ValueError:
        raise UnknownCategoryException("loan type", loan_type) from None


def lookup_base_rate(
    loan_type: Union[LoanType, str],
    credit_score: int,
    settings: LoanPricingSettings = loan_pricing_settings,
) -> float:
    """
    Find the base annual rate for a product and credit score.

    Args:
        loan_type: personal, home or auto
        credit_score: Bureau score
        settings: Pricing settings (uses defaults if not provided)

    Returns:
        Base annual rate in percent. Scores below every band floor use the
        lowest band.
    """
    loan_type = resolve_loan_type(loan_type)
    bands = settings.rate_table

    for min_score, rates in bands:
        if credit_score >= min_score:
            return rates[loan_type.value]

    return bands[-1][1][loan_type.value]


def calculate_annual_rate(
    loan_type: Union[LoanType, str],
    credit_score: int,
    term_months: int,
    settings: LoanPricingSettings = loan_pricing_settings,
) -> float:
    """Base rate plus the long-term surcharge where it applies."""
    rate = lookup_base_rate(loan_type, credit_score, settings)
    if term_months > settings.long_term_threshold_months:
        rate += settings.long_term_surcharge_percent
    return round(rate, 4)


def price_loan(
    loan_type: Union[LoanType, str],
    principal: float,
    term_months: int,
    credit_score: int,
    start_date: date,
    settings: LoanPricingSettings = loan_pricing_settings,
) -> LoanOffer:
    """
    Price a loan and build its schedule.

    Args:
        loan_type: personal, home or auto
        principal: Amount borrowed
        term_months: Number of monthly payments
        credit_score: Applicant's bureau score
        start_date: Reference date for the payment schedule
        settings: Pricing settings (uses defaults if not provided)

    Returns:
        LoanOffer with rate, fee, monthly payment and schedule

    Raises:
        UnknownCategoryException: If loan_type is not a known product
        InvalidLoanTermsException: If principal or term are out of range
    """
    loan_type = resolve_loan_type(loan_type)
    rate = calculate_annual_rate(loan_type, credit_score, term_months, settings)

    schedule = amortize(
        LoanTerms(
            principal=principal,
            annual_rate_percent=rate,
            term_months=term_months,
        ),
        start_date,
    )

    return LoanOffer(
        loan_type=loan_type,
        principal=principal,
        term_months=term_months,
        annual_rate_percent=rate,
        monthly_payment=schedule.monthly_payment,
        origination_fee=principal * settings.origination_fee_rate(loan_type.value),
        schedule=schedule,
    )
