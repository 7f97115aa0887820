"""
Risk Catalogs.

One generic flag catalog (flag type -> description) backs both KYC and the
compliance checks, and a separate alert catalog carries the headline copy
for fraud alerts. Lookups are exhaustive: a category missing from a catalog
raises UnknownCategoryException rather than falling through to a generic
description.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple, Union

from riskengine.domain.entities import AlertType, CheckType, Flag, FlagSeverity, FlagType
from riskengine.domain.exceptions import UnknownCategoryException


class RiskCatalog:
    """
    Maps flag types to their fixed descriptions.

    Args:
        name: Label used in error messages
        descriptions: One description per flag type the catalog covers
    """

    def __init__(self, name: str, descriptions: Mapping[FlagType, str]):
        self.name = name
        self._descriptions = dict(descriptions)

    def __contains__(self, flag_type: object) -> bool:
        return flag_type in self._descriptions

    def __len__(self) -> int:
        return len(self._descriptions)

    @property
    def types(self) -> Tuple[FlagType, ...]:
        return tuple(self._descriptions)

    def describe(self, flag_type: Union[FlagType, str]) -> str:
        try:
            return self._descriptions[FlagType(flag_type)]
        except (ValueError, KeyError):
            raise UnknownCategoryException(f"{self.name} flag type", flag_type) from None

    def flag(self, flag_type: Union[FlagType, str], severity: FlagSeverity) -> Flag:
        return Flag(
            type=FlagType(flag_type),
            severity=severity,
            description=self.describe(flag_type),
        )

    def draw_flags(
        self,
        candidates: Iterable[FlagType],
        count: int,
        severity: FlagSeverity,
        rng: random.Random,
    ) -> Tuple[Flag, ...]:
        """
        Pick up to `count` distinct flag types from candidates.

        Duplicate candidates are collapsed first, so a type can never be
        drawn twice.

        Args:
            candidates: Flag types eligible for selection
            count: Number of flags wanted
            severity: Severity applied to every drawn flag
            rng: Injected random generator

        Returns:
            Tuple of flags with unique types
        """
        unique = []
        for candidate in candidates:
            self.describe(candidate)
            flag_type = FlagType(candidate)
            if flag_type not in unique:
                unique.append(flag_type)

        chosen = rng.sample(unique, min(count, len(unique)))
        return tuple(self.flag(flag_type, severity) for flag_type in chosen)


KYC_CATALOG = RiskCatalog(
    "kyc",
    {
        FlagType.IDENTITY: "Identity information could not be fully verified",
        FlagType.ADDRESS: "Address history shows multiple recent changes",
        FlagType.WATCHLIST: "Potential name match with watchlist entry requires review",
        FlagType.FRAUD: "Unusual account activity patterns detected",
    },
)

COMPLIANCE_CATALOG = RiskCatalog(
    "compliance",
    {
        FlagType.IDENTITY: "Identity information inconsistency detected",
        FlagType.ADDRESS: "Multiple address changes in short time period",
        FlagType.DOCUMENT: "Document validation failed quality checks",
        FlagType.WATCHLIST: "Potential name match with watchlist",
        FlagType.TRANSACTION: "Unusual transaction pattern identified",
        FlagType.BEHAVIOR: "Suspicious login or application behavior",
        FlagType.KYC: "KYC verification results require additional review",
        FlagType.AML: "Potential AML risk patterns detected",
        FlagType.FRAUD: "Possible fraudulent activity indicators",
        FlagType.SANCTIONS: "Partial match with sanctioned entity",
        FlagType.PEP: "Possible politically exposed person connection",
    },
)

# Every compliance check draws from these plus its own type.
COMPLIANCE_BASE_CANDIDATES = (
    FlagType.IDENTITY,
    FlagType.ADDRESS,
    FlagType.DOCUMENT,
    FlagType.WATCHLIST,
    FlagType.TRANSACTION,
    FlagType.BEHAVIOR,
)


def compliance_candidates(check_type: CheckType) -> Tuple[FlagType, ...]:
    """Candidate flag types for a compliance check, without duplicates."""
    return tuple(dict.fromkeys(COMPLIANCE_BASE_CANDIDATES + (check_type.flag_type,)))


def resolve_check_type(check_type: Union[CheckType, str]) -> CheckType:
    try:
        return CheckType(check_type)
    except ValueError:
        raise UnknownCategoryException("check type", check_type) from None


# =============================================================================
# Fraud Alert Copy
# =============================================================================

@dataclass(frozen=True)
class AlertCopy:
    """Headline and description options for one alert type."""
    titles: Tuple[str, ...]
    descriptions: Tuple[str, ...]


class AlertCatalog:
    """Maps alert types to their title/description options."""

    def __init__(self, entries: Mapping[AlertType, AlertCopy]):
        self._entries = dict(entries)

    def __contains__(self, alert_type: object) -> bool:
        return alert_type in self._entries

    @property
    def types(self) -> Tuple[AlertType, ...]:
        return tuple(self._entries)

    def copy_for(self, alert_type: Union[AlertType, str]) -> AlertCopy:
        try:
            return self._entries[AlertType(alert_type)]
        except (ValueError, KeyError):
            raise UnknownCategoryException("alert type", alert_type) from None


ALERT_CATALOG = AlertCatalog({
    AlertType.TRANSACTION: AlertCopy(
        titles=(
            "Unusual Transaction Detected",
            "Suspicious Purchase Activity",
            "Potential Card Misuse",
            "High-Risk Transaction Flagged",
        ),
        descriptions=(
            "Transaction in unusual location for this account",
            "Multiple large transactions in short timeframe",
            "Transaction at high-risk merchant category",
            "Unusual spending pattern detected",
        ),
    ),
    AlertType.LOGIN: AlertCopy(
        titles=(
            "Suspicious Login Attempt",
            "Account Access from Unknown Location",
            "Multiple Failed Login Attempts",
            "Login from New Device",
        ),
        descriptions=(
            "Login attempt from unrecognized device and location",
            "Multiple failed password attempts followed by successful login",
            "Account accessed from suspicious IP address",
            "Login at unusual time from unfamiliar location",
        ),
    ),
    AlertType.DEVICE: AlertCopy(
        titles=(
            "New Device Added to Account",
            "Unusual Device Activity",
            "Device Verification Failed",
            "Suspicious Device Behavior",
        ),
        descriptions=(
            "New device added to account without verification",
            "Multiple devices accessing account simultaneously",
            "Device fingerprint matches known fraudulent pattern",
            "Unusual browser or device characteristics detected",
        ),
    ),
    AlertType.ACCOUNT_CHANGE: AlertCopy(
        titles=(
            "Suspicious Account Changes",
            "Profile Information Updated",
            "Contact Details Modified",
            "Security Settings Changed",
        ),
        descriptions=(
            "Multiple account settings changed in short timeframe",
            "Email and phone number changed simultaneously",
            "Password and security questions modified",
            "Account recovery options updated suspiciously",
        ),
    ),
    AlertType.IDENTITY: AlertCopy(
        titles=(
            "Potential Identity Theft",
            "Identity Verification Failed",
            "Document Verification Issues",
            "Identity Information Mismatch",
        ),
        descriptions=(
            "Submitted ID doesn't match account information",
            "Multiple identity verification failures",
            "Potential synthetic identity detected",
            "Document appears altered or manipulated",
        ),
    ),
})

ALERT_LOCATIONS = (
    "New York, NY",
    "Lagos, Nigeria",
    "Moscow, Russia",
    "Beijing, China",
    "Miami, FL",
)

DEVICE_PLATFORMS = ("Windows", "Mac", "iPhone", "Android", "Linux")


def resolve_alert_type(alert_type: Union[AlertType, str]) -> AlertType:
    try:
        return AlertType(alert_type)
    except ValueError:
        raise UnknownCategoryException("alert type", alert_type) from None
