"""Loan terms, amortization schedule and priced loan offer entities."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Tuple


class LoanType(str, Enum):
    PERSONAL = "personal"
    HOME = "home"
    AUTO = "auto"


@dataclass(frozen=True)
class LoanTerms:
    """
    Input terms for an amortizing loan.

    Attributes:
        principal: Amount borrowed (positive currency amount)
        annual_rate_percent: Nominal annual interest rate, e.g. 6.5 for 6.5%
        term_months: Number of monthly payments
    """

    principal: float
    annual_rate_percent: float
    term_months: int

    def validate(self) -> List[str]:
        errors = []

        if self.principal <= 0:
            errors.append("principal must be positive")

        if self.annual_rate_percent < 0:
            errors.append("annual_rate_percent cannot be negative")

        if self.term_months <= 0:
            errors.append("term_months must be positive")

        return errors

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / 12


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """A single monthly payment within an amortization schedule."""

    payment_number: int
    due_date: date
    total_payment: float
    principal_payment: float
    interest_payment: float
    remaining_principal: float

    def to_dict(self) -> dict:
        return {
            "payment_number": self.payment_number,
            "due_date": self.due_date.isoformat(),
            "total_payment": round(self.total_payment, 2),
            "principal_payment": round(self.principal_payment, 2),
            "interest_payment": round(self.interest_payment, 2),
            "remaining_principal": round(self.remaining_principal, 2),
        }


@dataclass(frozen=True)
class PaymentSchedule:
    """
    Ordered amortization schedule for a loan.

    The final entry always carries a remaining principal of exactly zero.
    """

    terms: LoanTerms
    monthly_payment: float
    entries: Tuple[PaymentScheduleEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    @property
    def total_paid(self) -> float:
        return sum(entry.total_payment for entry in self.entries)

    @property
    def total_interest(self) -> float:
        return sum(entry.interest_payment for entry in self.entries)

    def to_dict(self) -> dict:
        return {
            "principal": self.terms.principal,
            "annual_rate_percent": self.terms.annual_rate_percent,
            "term_months": self.terms.term_months,
            "monthly_payment": round(self.monthly_payment, 2),
            "total_interest": round(self.total_interest, 2),
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class LoanOffer:
    """A priced loan: rate and fees derived from the applicant's credit score."""

    loan_type: LoanType
    principal: float
    term_months: int
    annual_rate_percent: float
    monthly_payment: float
    origination_fee: float
    schedule: PaymentSchedule

    def to_dict(self) -> dict:
        return {
            "loan_type": self.loan_type.value,
            "principal": self.principal,
            "term_months": self.term_months,
            "annual_rate_percent": self.annual_rate_percent,
            "monthly_payment": round(self.monthly_payment, 2),
            "origination_fee": round(self.origination_fee, 2),
            "schedule": self.schedule.to_dict(),
        }
