"""
Compliance Check Engine.

Generalizes the KYC pattern to every check family on a 0-100 scale:

    score < 30        -> passed, no flags
    30 <= score < 70  -> pending-review, 1-2 flags
    score >= 70       -> failed, 2-3 flags

Flag severity follows the score: high from 70, medium from 50, low below.
Flag types come from the shared compliance catalog; the check's own type is
always one of the candidates.
"""

import random
from datetime import datetime
from typing import Optional, Tuple, Union

from riskengine.domain.entities import (
    CheckType,
    FlagSeverity,
    PercentRiskScore,
    RiskResult,
    RiskStatus,
    ScoreScale,
)
from riskengine.utils.date_utils import utc_now
from riskengine.utils.id_generator import generate_id
from .catalog import COMPLIANCE_CATALOG, RiskCatalog, compliance_candidates, resolve_check_type
from .settings import RiskSettings, risk_settings
from .sources import ScoreInput, resolve_score


def compliance_status(
    score: PercentRiskScore,
    settings: RiskSettings = risk_settings,
) -> RiskStatus:
    """Map a 0-100 score to a compliance status."""
    if score < settings.compliance_review_threshold:
        return RiskStatus.PASSED
    elif score < settings.compliance_fail_threshold:
        return RiskStatus.PENDING_REVIEW
    else:
        return RiskStatus.FAILED


def compliance_flag_severity(
    score: PercentRiskScore,
    settings: RiskSettings = risk_settings,
) -> FlagSeverity:
    """Severity for flags attached to a 0-100 compliance score."""
    if score >= settings.compliance_fail_threshold:
        return FlagSeverity.HIGH
    elif score >= settings.compliance_medium_severity_threshold:
        return FlagSeverity.MEDIUM
    else:
        return FlagSeverity.LOW


def compliance_flag_count_range(
    score: PercentRiskScore,
    settings: RiskSettings = risk_settings,
) -> Tuple[int, int]:
    """Inclusive (min, max) number of flags for a score; (0, 0) when passed."""
    if score < settings.compliance_review_threshold:
        return (0, 0)
    elif score < settings.compliance_fail_threshold:
        return (1, 2)
    else:
        return (2, 3)


def run_compliance_check(
    subject_id: str,
    check_type: Union[CheckType, str],
    score: ScoreInput,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    settings: RiskSettings = risk_settings,
    catalog: RiskCatalog = COMPLIANCE_CATALOG,
) -> RiskResult:
    """
    Run one compliance check for a subject.

    Args:
        subject_id: Customer identifier
        check_type: One of the eleven check families
        score: Raw 0-100 score or a RiskScoreSource producing one
        rng: Injected generator for flag selection and ids (fresh one if omitted)
        now: Evaluation time (current UTC time if omitted)
        settings: Risk settings (uses defaults if not provided)
        catalog: Flag catalog to draw from

    Returns:
        RiskResult on the percent scale

    Raises:
        UnknownCategoryException: If check_type is not a known check family
        ValueError: If the score is outside [0, 100]
    """
    check_type = resolve_check_type(check_type)
    rng = rng or random.Random()
    now = now or utc_now()

    value = PercentRiskScore(resolve_score(score, ScoreScale.PERCENT))
    status = compliance_status(value, settings)

    flags = ()
    min_flags, max_flags = compliance_flag_count_range(value, settings)
    if max_flags > 0:
        flags = catalog.draw_flags(
            candidates=compliance_candidates(check_type),
            count=rng.randint(min_flags, max_flags),
            severity=compliance_flag_severity(value, settings),
            rng=rng,
        )

    return RiskResult(
        id=generate_id("compliance", rng),
        subject_id=subject_id,
        check_type=check_type,
        status=status,
        risk_score=value,
        score_scale=ScoreScale.PERCENT,
        timestamp=now,
        flags=flags,
        notes=f"{check_type.value.upper()} compliance check {status.value}",
    )
