"""
Risk Settings for KYC, compliance checks and fraud alerts.

Environment variables use the RISK_ prefix:
    RISK_KYC_ELEVATED_STATUS=failed
    RISK_COMPLIANCE_FAIL_THRESHOLD=75
    RISK_FRAUD_SEVERITY_WEIGHTS_JSON='[["critical",0.1],["high",0.3],["medium",0.4],["low",0.2]]'
"""

import json
from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from riskengine.domain.entities import AlertSeverity, RiskStatus


class RiskSettings(BaseSettings):
    """
    Configurable thresholds for risk checks.

    All settings can be overridden via environment variables with RISK_ prefix.
    KYC thresholds are on the 0-1 scale, compliance thresholds on 0-100.
    """

    model_config = SettingsConfigDict(
        env_prefix="RISK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === KYC (0-1 scale) ===
    kyc_elevated_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="KYC scores at or above this are not passed and carry flags",
    )
    kyc_high_severity_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="KYC scores above this produce high-severity flags",
    )
    kyc_elevated_status: RiskStatus = Field(
        default=RiskStatus.PENDING_REVIEW,
        description="Status given to elevated KYC results when the caller does not choose",
    )
    kyc_min_flags: int = Field(default=1, ge=1)
    kyc_max_flags: int = Field(default=3, ge=1)

    # === Compliance (0-100 scale) ===
    compliance_review_threshold: float = Field(
        default=30.0,
        ge=0.0,
        le=100.0,
        description="Scores at or above this go to pending-review and carry flags",
    )
    compliance_fail_threshold: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Scores at or above this fail with high-severity flags",
    )
    compliance_medium_severity_threshold: float = Field(
        default=50.0,
        ge=0.0,
        le=100.0,
        description="Review-band scores at or above this get medium flags (low below)",
    )

    # === Fraud Alerts ===
    fraud_severity_weights_json: str = Field(
        default='[["critical",0.2],["high",0.3],["medium",0.3],["low",0.2]]',
        description="Severity distribution as JSON: [[severity, probability], ...] in draw order",
    )

    @field_validator("kyc_elevated_status")
    @classmethod
    def validate_elevated_status(cls, v: RiskStatus) -> RiskStatus:
        if v == RiskStatus.PASSED:
            raise ValueError("kyc_elevated_status must be failed or pending-review")
        return v

    @field_validator("fraud_severity_weights_json")
    @classmethod
    def validate_severity_weights_json(cls, v: str) -> str:
        """Validate that the severity distribution is well-formed and sums to 1."""
        try:
            weights = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(weights, list) or not weights:
            raise ValueError("Severity weights must be a non-empty list")
        seen = set()
        for entry in weights:
            if not isinstance(entry, list) or len(entry) != 2:
                raise ValueError("Each entry must be [severity, probability]")
            severity, probability = entry
            if severity not in {s.value for s in AlertSeverity}:
                raise ValueError(f"Unknown severity: {severity!r}")
            if severity in seen:
                raise ValueError(f"Duplicate severity: {severity!r}")
            if not isinstance(probability, (int, float)) or probability < 0:
                raise ValueError(f"Probability for {severity} must be non-negative")
            seen.add(severity)
        total = sum(probability for _, probability in weights)
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Severity probabilities must sum to 1, got {total}")
        return v

    @model_validator(mode="after")
    def check_band_order(self) -> "RiskSettings":
        if self.kyc_high_severity_threshold < self.kyc_elevated_threshold:
            raise ValueError("kyc_high_severity_threshold < kyc_elevated_threshold")
        if not (
            self.compliance_review_threshold
            <= self.compliance_medium_severity_threshold
            <= self.compliance_fail_threshold
        ):
            raise ValueError("compliance thresholds must satisfy review <= medium <= fail")
        if self.kyc_max_flags < self.kyc_min_flags:
            raise ValueError("kyc_max_flags < kyc_min_flags")
        return self

    @property
    def fraud_severity_thresholds(self) -> List[Tuple[AlertSeverity, float]]:
        """Cumulative draw thresholds, e.g. [(critical, 0.2), (high, 0.5), ...]."""
        thresholds = []
        cumulative = 0.0
        for severity, probability in json.loads(self.fraud_severity_weights_json):
            cumulative += probability
            thresholds.append((AlertSeverity(severity), cumulative))
        return thresholds


@lru_cache
def get_risk_settings() -> RiskSettings:
    """Get cached risk settings instance."""
    return RiskSettings()


risk_settings = get_risk_settings()
