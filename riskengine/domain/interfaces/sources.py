"""Score source interfaces."""

from abc import ABC, abstractmethod


class RiskScoreSource(ABC):
    """
    Abstract supplier of raw risk scores.

    The engine never rolls its own dice: callers hand it either a raw
    score or a source, and the source decides where the number comes from
    (an upstream model, a scripted test sequence, a fixture generator).
    """

    @abstractmethod
    def next_score(self) -> float:
        """
        Produce the next risk score.

        Returns:
            A score on the scale expected by the consuming check
            (0-1 for KYC, 0-100 for compliance checks)
        """
        ...
