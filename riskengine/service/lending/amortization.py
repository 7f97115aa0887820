"""
Amortization Scheduler.

Builds level-payment schedules for fixed-rate amortizing loans. The
schedule always retires the principal exactly: whatever floating-point
residue is left after the last regular payment is folded into that final
principal payment.
"""

import math
from datetime import date
from typing import List

from riskengine.domain.entities import LoanTerms, PaymentSchedule, PaymentScheduleEntry
from riskengine.domain.exceptions import InvalidLoanTermsException
from riskengine.utils.date_utils import add_months


def calculate_monthly_payment(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
) -> float:
    """
    Level monthly payment for an amortizing loan.

    Uses the annuity formula M = P * r * (1+r)^n / ((1+r)^n - 1) with
    r = annual_rate_percent / 100 / 12. A zero rate repays principal in
    equal slices.

    Args:
        principal: Amount borrowed
        annual_rate_percent: Nominal annual rate in percent
        term_months: Number of payments

    Returns:
        The monthly payment amount

    Raises:
        InvalidLoanTermsException: If the terms are degenerate
    """
    terms = _checked_terms(principal, annual_rate_percent, term_months)
    return _level_payment(terms)


def calculate_total_interest(
    monthly_payment: float,
    term_months: int,
    principal: float,
) -> float:
    """Total interest paid over the life of a loan."""
    return monthly_payment * term_months - principal


def build_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    start_date: date,
) -> PaymentSchedule:
    """
    Build the full amortization schedule.

    Each period pays interest on the outstanding balance and the rest of
    the level payment goes to principal. On the final period the principal
    payment is set to the outstanding balance so the remaining principal is
    exactly zero.

    Args:
        principal: Amount borrowed (must be positive)
        annual_rate_percent: Nominal annual rate in percent (must not be negative)
        term_months: Number of monthly payments (must be positive)
        start_date: Reference date; payment i is due i months after it

    Returns:
        PaymentSchedule with exactly term_months entries

    Raises:
        InvalidLoanTermsException: If any input is out of range
    """
    terms = _checked_terms(principal, annual_rate_percent, term_months)
    return amortize(terms, start_date)


def amortize(terms: LoanTerms, start_date: date) -> PaymentSchedule:
    """Build the amortization schedule for a LoanTerms record."""
    errors = terms.validate()
    if errors:
        raise InvalidLoanTermsException(errors)

    rate = terms.monthly_rate
    payment = _level_payment(terms)

    entries: List[PaymentScheduleEntry] = []
    remaining = float(terms.principal)

    for number in range(1, terms.term_months + 1):
        interest = remaining * rate

        if number == terms.term_months:
            # Final period absorbs the residue
            principal_paid = remaining
            remaining = 0.0
        else:
            principal_paid = payment - interest
            remaining -= principal_paid

        entries.append(PaymentScheduleEntry(
            payment_number=number,
            due_date=add_months(start_date, number),
            total_payment=principal_paid + interest,
            principal_payment=principal_paid,
            interest_payment=interest,
            remaining_principal=remaining,
        ))

    return PaymentSchedule(
        terms=terms,
        monthly_payment=payment,
        entries=tuple(entries),
    )


def _checked_terms(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
) -> LoanTerms:
    terms = LoanTerms(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        term_months=term_months,
    )
    errors = terms.validate()
    if errors:
        raise InvalidLoanTermsException(errors)
    return terms


def _level_payment(terms: LoanTerms) -> float:
    rate = terms.monthly_rate
    n = terms.term_months

    if rate == 0:
        return terms.principal / n

    # expm1/log1p keep (1+r)^n - 1 nonzero for tiny positive rates
    exponent = n * math.log1p(rate)
    return terms.principal * rate * math.exp(exponent) / math.expm1(exponent)
