"""
Test-data generators.

Stochastic fixtures for demos and tests. Nothing in the engine imports this
module: the checks take scores from a RiskScoreSource and never roll their
own dice. These generators reproduce the demo's behaviour on top of that
interface:

- KYC checks pass 85% of the time
- Compliance checks pass 85% of the time, sanctions and PEP screens 90%
- Elevated KYC results split 50/50 between failed and pending-review

Every generator takes the caller's random.Random so seeded runs repeat.
"""

import random
from typing import Union

from riskengine.domain.entities import CheckType, CreditProfile, RiskStatus
from riskengine.domain.interfaces import RiskScoreSource
from riskengine.service.risk.catalog import resolve_check_type

DEFAULT_PASS_RATE = 0.85
STRICT_PASS_RATE = 0.90
STRICT_CHECK_TYPES = frozenset({CheckType.SANCTIONS, CheckType.PEP})

CREDIT_SCORE_BANDS = {
    "low": (740, 850),
    "medium": (670, 740),
    "high": (300, 670),
}


class SimulatedUnitScoreSource(RiskScoreSource):
    """
    0-1 KYC scores with a target pass rate.

    Passing draws land in [0, 0.3), the rest in [0.3, 1.0).
    """

    def __init__(self, rng: random.Random, pass_rate: float = DEFAULT_PASS_RATE):
        self._rng = rng
        self.pass_rate = pass_rate

    def next_score(self) -> float:
        if self._rng.random() < self.pass_rate:
            return self._rng.random() * 0.3
        return 0.3 + self._rng.random() * 0.7


class SimulatedPercentScoreSource(RiskScoreSource):
    """
    Integer 0-100 compliance scores with a target pass rate.

    Passing draws land in 0-29, the rest in 30-99.
    """

    def __init__(self, rng: random.Random, pass_rate: float = DEFAULT_PASS_RATE):
        self._rng = rng
        self.pass_rate = pass_rate

    def next_score(self) -> float:
        if self._rng.random() < self.pass_rate:
            return float(self._rng.randrange(0, 30))
        return float(self._rng.randrange(30, 100))


def compliance_score_source(
    check_type: Union[CheckType, str],
    rng: random.Random,
) -> SimulatedPercentScoreSource:
    """Score source with the demo pass rate for a check family."""
    check_type = resolve_check_type(check_type)
    pass_rate = STRICT_PASS_RATE if check_type in STRICT_CHECK_TYPES else DEFAULT_PASS_RATE
    return SimulatedPercentScoreSource(rng, pass_rate=pass_rate)


def coin_flip_tie_break(rng: random.Random) -> RiskStatus:
    """The demo's placeholder: an even split between failed and pending-review."""
    return RiskStatus.FAILED if rng.random() < 0.5 else RiskStatus.PENDING_REVIEW


def generate_credit_score(risk_level: str, rng: random.Random) -> int:
    """
    Credit score for a customer risk level.

    Args:
        risk_level: "low" (740-849), "medium" (670-739) or "high" (300-669);
            anything else draws from the full 300-849 range
        rng: Injected random generator
    """
    low, high = CREDIT_SCORE_BANDS.get(risk_level, (300, 850))
    return rng.randrange(low, high)


def generate_credit_profile(risk_level: str, rng: random.Random) -> CreditProfile:
    """A plausible CreditProfile for a customer risk level."""
    dti_range = {"low": (5.0, 30.0), "medium": (20.0, 42.0)}.get(risk_level, (30.0, 60.0))
    return CreditProfile(
        credit_score=generate_credit_score(risk_level, rng),
        debt_to_income_percent=round(rng.uniform(*dti_range), 1),
        annual_income=float(rng.randrange(18_000, 180_000, 500)),
    )
