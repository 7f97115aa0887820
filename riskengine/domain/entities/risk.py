"""Risk assessment entities shared by KYC and compliance checks."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import NewType, Tuple

# KYC scores live on 0-1, generic compliance scores on 0-100. The two
# scales are kept apart on purpose; see DESIGN.md.
UnitRiskScore = NewType("UnitRiskScore", float)
PercentRiskScore = NewType("PercentRiskScore", float)


class ScoreScale(str, Enum):
    UNIT = "unit"
    PERCENT = "percent"

    @property
    def upper_bound(self) -> float:
        return 1.0 if self is ScoreScale.UNIT else 100.0

    def check(self, score: float) -> float:
        """Return the score unchanged, or raise ValueError if it is off-scale."""
        if not 0.0 <= score <= self.upper_bound:
            raise ValueError(
                f"risk score {score!r} outside the {self.value} scale "
                f"[0, {self.upper_bound:g}]"
            )
        return score


class RiskStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    PENDING_REVIEW = "pending-review"


class FlagSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FlagType(str, Enum):
    """Finding categories a flag can carry."""
    IDENTITY = "identity"
    ADDRESS = "address"
    DOCUMENT = "document"
    WATCHLIST = "watchlist"
    TRANSACTION = "transaction"
    BEHAVIOR = "behavior"
    KYC = "kyc"
    AML = "aml"
    FRAUD = "fraud"
    SANCTIONS = "sanctions"
    PEP = "pep"


class CheckType(str, Enum):
    """Compliance check families."""
    KYC = "kyc"
    AML = "aml"
    FRAUD = "fraud"
    SANCTIONS = "sanctions"
    PEP = "pep"
    IDENTITY = "identity"
    ADDRESS = "address"
    DOCUMENT = "document"
    WATCHLIST = "watchlist"
    TRANSACTION = "transaction"
    BEHAVIOR = "behavior"

    @property
    def flag_type(self) -> FlagType:
        """The flag category a check always offers as a candidate."""
        return FlagType(self.value)


@dataclass(frozen=True)
class Flag:
    """A typed, severity-ranked finding attached to a risk assessment."""

    type: FlagType
    severity: FlagSeverity
    description: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class RiskResult:
    """
    Outcome of a KYC or compliance check.

    Attributes:
        id: Identifier of this result
        subject_id: Customer the check was run for
        check_type: Check family that produced the result
        status: passed / failed / pending-review
        risk_score: Score on the scale named by score_scale
        score_scale: unit (0-1, KYC) or percent (0-100, compliance)
        timestamp: When the check was evaluated
        flags: Findings, at most one per flag type
        notes: Fixed summary sentence
    """

    id: str
    subject_id: str
    check_type: CheckType
    status: RiskStatus
    risk_score: float
    score_scale: ScoreScale
    timestamp: datetime
    flags: Tuple[Flag, ...] = field(default_factory=tuple)
    notes: str = ""

    def __post_init__(self):
        seen = set()
        for flag in self.flags:
            if flag.type in seen:
                raise ValueError(f"duplicate flag type: {flag.type.value}")
            seen.add(flag.type)

    @property
    def flag_types(self) -> Tuple[FlagType, ...]:
        return tuple(flag.type for flag in self.flags)

    @property
    def highest_severity(self) -> FlagSeverity | None:
        order = [FlagSeverity.LOW, FlagSeverity.MEDIUM, FlagSeverity.HIGH]
        if not self.flags:
            return None
        return max((flag.severity for flag in self.flags), key=order.index)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject_id": self.subject_id,
            "check_type": self.check_type.value,
            "status": self.status.value,
            "risk_score": self.risk_score,
            "score_scale": self.score_scale.value,
            "timestamp": self.timestamp.isoformat(),
            "flags": [flag.to_dict() for flag in self.flags],
            "notes": self.notes,
        }
