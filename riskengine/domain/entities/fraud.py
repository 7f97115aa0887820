"""Fraud alert entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union


class AlertType(str, Enum):
    TRANSACTION = "transaction"
    LOGIN = "login"
    DEVICE = "device"
    ACCOUNT_CHANGE = "account-change"
    IDENTITY = "identity"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def score_band(self) -> Tuple[int, int]:
        """Half-open [low, high) risk score range for this severity."""
        return SEVERITY_SCORE_BANDS[self]


SEVERITY_SCORE_BANDS = {
    AlertSeverity.CRITICAL: (80, 100),
    AlertSeverity.HIGH: (60, 80),
    AlertSeverity.MEDIUM: (40, 60),
    AlertSeverity.LOW: (0, 40),
}


class AlertStatus(str, Enum):
    # Transitions out of NEW belong to case management.
    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


@dataclass(frozen=True)
class TransactionAlertDetails:
    transaction_amount: int
    location: str
    affected_account_id: str
    affected_card_id: str

    def to_dict(self) -> dict:
        return {
            "transaction_amount": self.transaction_amount,
            "location": self.location,
            "affected_account_id": self.affected_account_id,
            "affected_card_id": self.affected_card_id,
        }


@dataclass(frozen=True)
class LoginAlertDetails:
    ip_address: str
    location: str
    device_info: str

    def to_dict(self) -> dict:
        return {
            "ip_address": self.ip_address,
            "location": self.location,
            "device_info": self.device_info,
        }


@dataclass(frozen=True)
class DeviceAlertDetails:
    device_info: str
    ip_address: str

    def to_dict(self) -> dict:
        return {
            "device_info": self.device_info,
            "ip_address": self.ip_address,
        }


AlertDetails = Union[TransactionAlertDetails, LoginAlertDetails, DeviceAlertDetails]


@dataclass(frozen=True)
class FraudAlert:
    """
    A severity-scored fraud alert raised for a customer.

    Attributes:
        id: Alert identifier
        subject_id: Customer the alert concerns
        alert_type: Event family that triggered the alert
        severity: low / medium / high / critical
        risk_score: 0-100, always inside the band of its severity
        title: Short headline from the alert-type catalog
        description: One-line explanation from the alert-type catalog
        status: Always NEW at creation
        timestamp: When the alert was raised
        details: Type-specific payload (transaction, login and device alerts only)
    """

    id: str
    subject_id: str
    alert_type: AlertType
    severity: AlertSeverity
    risk_score: int
    title: str
    description: str
    timestamp: datetime
    status: AlertStatus = AlertStatus.NEW
    details: Optional[AlertDetails] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject_id": self.subject_id,
            "alert_type": self.alert_type.value,
            "severity": self.severity.value,
            "risk_score": self.risk_score,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details.to_dict() if self.details else None,
        }
