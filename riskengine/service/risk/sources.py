"""
Risk Score Sources.

Deterministic RiskScoreSource implementations and the helper the checks
use to turn "a raw score or a source" into a validated number.
"""

from typing import Iterable, Union

from riskengine.domain.entities import ScoreScale
from riskengine.domain.interfaces import RiskScoreSource

ScoreInput = Union[float, int, RiskScoreSource]


class FixedScoreSource(RiskScoreSource):
    """Always yields the same score."""

    def __init__(self, score: float):
        self._score = float(score)

    def next_score(self) -> float:
        return self._score


class SequenceScoreSource(RiskScoreSource):
    """
    Yields scripted scores in order.

    Useful for replaying upstream model output or driving tests through a
    known series of outcomes.
    """

    def __init__(self, scores: Iterable[float]):
        self._scores = iter(list(scores))

    def next_score(self) -> float:
        try:
            return float(next(self._scores))
        except StopIteration:
            raise LookupError("score sequence exhausted") from None


def resolve_score(score: ScoreInput, scale: ScoreScale) -> float:
    """
    Read a score from a raw number or a source and check it against a scale.

    Args:
        score: Raw score, or a RiskScoreSource to draw one from
        scale: Scale the consuming check works on

    Returns:
        The score as a float

    Raises:
        ValueError: If the score falls outside the scale
    """
    if isinstance(score, RiskScoreSource):
        value = score.next_score()
    else:
        value = score
    return scale.check(float(value))
