"""
Risk Module - KYC assessment, compliance checks and fraud alerts
"""

from .settings import RiskSettings, risk_settings
from .catalog import (
    ALERT_CATALOG,
    COMPLIANCE_CATALOG,
    KYC_CATALOG,
    AlertCatalog,
    AlertCopy,
    RiskCatalog,
    compliance_candidates,
    resolve_alert_type,
    resolve_check_type,
)
from .sources import FixedScoreSource, SequenceScoreSource, resolve_score
from .kyc import assess_kyc, kyc_flag_severity
from .compliance import (
    compliance_flag_count_range,
    compliance_flag_severity,
    compliance_status,
    run_compliance_check,
)
from .fraud_alerts import draw_risk_score, draw_severity, generate_fraud_alert

__all__ = [
    # Settings
    "RiskSettings",
    "risk_settings",
    # Catalogs
    "ALERT_CATALOG",
    "COMPLIANCE_CATALOG",
    "KYC_CATALOG",
    "AlertCatalog",
    "AlertCopy",
    "RiskCatalog",
    "compliance_candidates",
    "resolve_alert_type",
    "resolve_check_type",
    # Score Sources
    "FixedScoreSource",
    "SequenceScoreSource",
    "resolve_score",
    # KYC
    "assess_kyc",
    "kyc_flag_severity",
    # Compliance
    "compliance_flag_count_range",
    "compliance_flag_severity",
    "compliance_status",
    "run_compliance_check",
    # Fraud Alerts
    "draw_risk_score",
    "draw_severity",
    "generate_fraud_alert",
]
