"""Domain Entities - Engine input and result records."""

from .card import CardOffer, CardTier
from .credit import CreditDecision, CreditProfile, CreditTier
from .fraud import (
    AlertDetails,
    AlertSeverity,
    AlertStatus,
    AlertType,
    DeviceAlertDetails,
    FraudAlert,
    LoginAlertDetails,
    SEVERITY_SCORE_BANDS,
    TransactionAlertDetails,
)
from .loan import LoanOffer, LoanTerms, LoanType, PaymentSchedule, PaymentScheduleEntry
from .risk import (
    CheckType,
    Flag,
    FlagSeverity,
    FlagType,
    PercentRiskScore,
    RiskResult,
    RiskStatus,
    ScoreScale,
    UnitRiskScore,
)

__all__ = [
    "AlertDetails",
    "AlertSeverity",
    "AlertStatus",
    "AlertType",
    "CardOffer",
    "CardTier",
    "CheckType",
    "CreditDecision",
    "CreditProfile",
    "CreditTier",
    "DeviceAlertDetails",
    "Flag",
    "FlagSeverity",
    "FlagType",
    "FraudAlert",
    "LoanOffer",
    "LoanTerms",
    "LoanType",
    "LoginAlertDetails",
    "PaymentSchedule",
    "PaymentScheduleEntry",
    "PercentRiskScore",
    "RiskResult",
    "RiskStatus",
    "SEVERITY_SCORE_BANDS",
    "ScoreScale",
    "TransactionAlertDetails",
    "UnitRiskScore",
]
