"""Prometheus metrics for the risk engine.

Metrics are organized into two categories:

Business Metrics (for Risk/Compliance):
- riskengine_credit_decision_total: Credit decisions by outcome
- riskengine_credit_limit_bucket: Approved limits by bucket
- riskengine_risk_check_total: KYC/compliance results by check type and status
- riskengine_risk_flag_total: Flags raised by type and severity
- riskengine_fraud_alert_total: Fraud alerts by type and severity
- riskengine_schedule_total: Amortization schedules built
- riskengine_card_offer_total: Card offers by tier

Technical Metrics (for Engineering):
- riskengine_operation_latency_seconds: Latency per engine operation
- riskengine_operation_errors_total: Rejected calls per operation and error code
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from riskengine.core.config import settings


# =============================================================================
# Business Metrics
# =============================================================================

credit_decision_total = Counter(
    "riskengine_credit_decision_total",
    "Total number of credit decisions made",
    ["outcome"],  # approved, declined
)

credit_limit_bucket = Counter(
    "riskengine_credit_limit_bucket",
    "Approved credit limits by bucket",
    ["bucket"],
)

risk_check_total = Counter(
    "riskengine_risk_check_total",
    "Total number of KYC and compliance checks by outcome",
    ["check_type", "status"],
)

risk_flag_total = Counter(
    "riskengine_risk_flag_total",
    "Total number of flags raised on risk checks",
    ["flag_type", "severity"],
)

fraud_alert_total = Counter(
    "riskengine_fraud_alert_total",
    "Total number of fraud alerts raised",
    ["alert_type", "severity"],
)

schedule_total = Counter(
    "riskengine_schedule_total",
    "Total number of amortization schedules built",
)

card_offer_total = Counter(
    "riskengine_card_offer_total",
    "Total number of credit card offers by tier",
    ["tier"],  # premium, standard, secured
)


# =============================================================================
# Technical Metrics
# =============================================================================

operation_latency = Histogram(
    "riskengine_operation_latency_seconds",
    "Engine operation latency in seconds",
    ["operation"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

operation_errors = Counter(
    "riskengine_operation_errors_total",
    "Total number of rejected engine calls",
    ["operation", "error"],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_decision(approved: bool, limit: Optional[int]) -> None:
    """Record a credit decision in metrics."""
    if not settings.metrics_enabled:
        return

    outcome = "approved" if approved else "declined"
    credit_decision_total.labels(outcome=outcome).inc()

    if approved:
        credit_limit_bucket.labels(bucket=get_credit_limit_bucket(limit or 0)).inc()


def get_credit_limit_bucket(limit: int) -> str:
    """Map an approved limit to a bucket label."""
    if limit <= 0:
        return "0"
    elif limit <= 5_000:
        return "0-5k"
    elif limit <= 10_000:
        return "5k-10k"
    elif limit <= 25_000:
        return "10k-25k"
    elif limit <= 50_000:
        return "25k-50k"
    else:
        return "50k+"


def record_risk_check(check_type: str, status: str, flags) -> None:
    """Record a KYC/compliance result and its flags."""
    if not settings.metrics_enabled:
        return

    risk_check_total.labels(check_type=check_type, status=status).inc()
    for flag in flags:
        risk_flag_total.labels(
            flag_type=flag.type.value,
            severity=flag.severity.value,
        ).inc()


def record_fraud_alert(alert_type: str, severity: str) -> None:
    """Record a raised fraud alert."""
    if not settings.metrics_enabled:
        return

    fraud_alert_total.labels(alert_type=alert_type, severity=severity).inc()


def record_schedule() -> None:
    """Record a built amortization schedule."""
    if not settings.metrics_enabled:
        return

    schedule_total.inc()


def record_card_offer(tier: str) -> None:
    """Record a priced credit card offer."""
    if not settings.metrics_enabled:
        return

    card_offer_total.labels(tier=tier).inc()


def record_operation_error(operation: str, error: str) -> None:
    """Record a rejected call (invalid terms, unknown category)."""
    if not settings.metrics_enabled:
        return

    operation_errors.labels(operation=operation, error=error).inc()


@contextmanager
def track_operation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track engine operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        if settings.metrics_enabled:
            operation_latency.labels(operation=operation).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)
