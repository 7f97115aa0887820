"""
KYC Risk Assessment.

Classifies a 0-1 identity risk score:

- Below the elevated threshold (0.3): passed, no flags
- At or above it: the caller's chosen status (failed or pending-review),
  with 1-3 distinct flags from the KYC catalog; high severity above 0.7,
  medium otherwise
"""

import random
from datetime import datetime
from typing import Optional, Union

from riskengine.domain.entities import (
    CheckType,
    FlagSeverity,
    RiskResult,
    RiskStatus,
    ScoreScale,
    UnitRiskScore,
)
from riskengine.utils.date_utils import utc_now
from riskengine.utils.id_generator import generate_id
from .catalog import KYC_CATALOG, RiskCatalog
from .settings import RiskSettings, risk_settings
from .sources import ScoreInput, resolve_score

NOTES_CLEAR = "Automated verification completed successfully"
NOTES_FLAGGED = "Further review required due to identified risk factors"


def kyc_flag_severity(
    score: UnitRiskScore,
    settings: RiskSettings = risk_settings,
) -> FlagSeverity:
    """Severity for flags attached to an elevated KYC score."""
    if score > settings.kyc_high_severity_threshold:
        return FlagSeverity.HIGH
    return FlagSeverity.MEDIUM


def assess_kyc(
    subject_id: str,
    score: ScoreInput,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    elevated_status: Optional[Union[RiskStatus, str]] = None,
    settings: RiskSettings = risk_settings,
    catalog: RiskCatalog = KYC_CATALOG,
) -> RiskResult:
    """
    Run a KYC assessment for a subject.

    Args:
        subject_id: Customer identifier
        score: Raw 0-1 score or a RiskScoreSource producing one
        rng: Injected generator for flag selection and ids (fresh one if omitted)
        now: Evaluation time (current UTC time if omitted)
        elevated_status: Status for scores at or above the elevated
            threshold; FAILED or PENDING_REVIEW. Defaults to
            settings.kyc_elevated_status.
        settings: Risk settings (uses defaults if not provided)
        catalog: Flag catalog to draw from

    Returns:
        RiskResult on the unit scale

    Raises:
        ValueError: If the score is outside [0, 1] or elevated_status is PASSED
            or not a known status
    """
    rng = rng or random.Random()
    now = now or utc_now()
    elevated_status = RiskStatus(elevated_status or settings.kyc_elevated_status)
    if elevated_status == RiskStatus.PASSED:
        raise ValueError("elevated_status must be failed or pending-review")

    value = UnitRiskScore(resolve_score(score, ScoreScale.UNIT))

    if value < settings.kyc_elevated_threshold:
        status = RiskStatus.PASSED
        flags = ()
    else:
        status = elevated_status
        count = rng.randint(settings.kyc_min_flags, settings.kyc_max_flags)
        flags = catalog.draw_flags(
            candidates=catalog.types,
            count=count,
            severity=kyc_flag_severity(value, settings),
            rng=rng,
        )

    return RiskResult(
        id=generate_id("kyc", rng),
        subject_id=subject_id,
        check_type=CheckType.KYC,
        status=status,
        risk_score=value,
        score_scale=ScoreScale.UNIT,
        timestamp=now,
        flags=flags,
        notes=NOTES_FLAGGED if flags else NOTES_CLEAR,
    )
