"""
Fraud Alert Generator.

Builds a severity-scored alert for a customer event. Severity comes from
one uniform draw against cumulative thresholds (critical 20%, high 30%,
medium 30%, low 20% by default) unless the caller overrides it; the risk
score is then drawn from that severity's band.
"""

import random
from datetime import datetime
from typing import Optional, Union

from riskengine.domain.entities import (
    AlertDetails,
    AlertSeverity,
    AlertStatus,
    AlertType,
    DeviceAlertDetails,
    FraudAlert,
    LoginAlertDetails,
    TransactionAlertDetails,
)
from riskengine.utils.date_utils import utc_now
from riskengine.utils.id_generator import generate_digits, generate_id, generate_ip_address
from .catalog import (
    ALERT_CATALOG,
    ALERT_LOCATIONS,
    DEVICE_PLATFORMS,
    AlertCatalog,
    resolve_alert_type,
)
from .settings import RiskSettings, risk_settings


def draw_severity(
    rng: random.Random,
    settings: RiskSettings = risk_settings,
) -> AlertSeverity:
    """
    Draw a severity from the configured distribution.

    Args:
        rng: Injected random generator
        settings: Risk settings (uses defaults if not provided)

    Returns:
        The first severity whose cumulative threshold exceeds the draw
    """
    draw = rng.random()
    thresholds = settings.fraud_severity_thresholds

    for severity, cumulative in thresholds:
        if draw < cumulative:
            return severity

    # Float rounding can leave the cumulative total a hair under 1.0
    return thresholds[-1][0]


def draw_risk_score(severity: AlertSeverity, rng: random.Random) -> int:
    """Integer risk score inside the half-open band of a severity."""
    low, high = severity.score_band
    return rng.randrange(low, high)


def build_alert_details(
    alert_type: AlertType,
    rng: random.Random,
) -> Optional[AlertDetails]:
    """
    Type-specific payload for an alert.

    Only transaction, login and device alerts carry details.
    """
    if alert_type == AlertType.TRANSACTION:
        return TransactionAlertDetails(
            transaction_amount=rng.randrange(50, 1050),
            location=rng.choice(ALERT_LOCATIONS),
            affected_account_id=f"acct-{generate_digits(8, rng)}",
            affected_card_id=f"card-{generate_digits(8, rng)}",
        )
    elif alert_type == AlertType.LOGIN:
        return LoginAlertDetails(
            ip_address=generate_ip_address(rng),
            location=rng.choice(ALERT_LOCATIONS),
            device_info=f"{rng.choice(DEVICE_PLATFORMS)} device",
        )
    elif alert_type == AlertType.DEVICE:
        return DeviceAlertDetails(
            device_info=f"New {rng.choice(DEVICE_PLATFORMS)} device",
            ip_address=generate_ip_address(rng),
        )
    return None


def generate_fraud_alert(
    subject_id: str,
    alert_type: Union[AlertType, str] = AlertType.TRANSACTION,
    severity_override: Optional[Union[AlertSeverity, str]] = None,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    settings: RiskSettings = risk_settings,
    catalog: AlertCatalog = ALERT_CATALOG,
) -> FraudAlert:
    """
    Raise a fraud alert for a subject.

    Args:
        subject_id: Customer identifier
        alert_type: Event family (transaction, login, device, account-change, identity)
        severity_override: Fixed severity; drawn from the distribution if omitted
        rng: Injected generator (fresh one if omitted)
        now: Alert time (current UTC time if omitted)
        settings: Risk settings (uses defaults if not provided)
        catalog: Title/description catalog

    Returns:
        FraudAlert with status NEW

    Raises:
        UnknownCategoryException: If alert_type is not a known alert family
        ValueError: If severity_override is not a known severity
    """
    alert_type = resolve_alert_type(alert_type)
    copy = catalog.copy_for(alert_type)
    rng = rng or random.Random()
    now = now or utc_now()

    title = rng.choice(copy.titles)
    description = rng.choice(copy.descriptions)

    if severity_override is not None:
        severity = AlertSeverity(severity_override)
    else:
        severity = draw_severity(rng, settings)

    return FraudAlert(
        id=generate_id("alert", rng),
        subject_id=subject_id,
        alert_type=alert_type,
        severity=severity,
        risk_score=draw_risk_score(severity, rng),
        title=title,
        description=description,
        timestamp=now,
        status=AlertStatus.NEW,
        details=build_alert_details(alert_type, rng),
    )
