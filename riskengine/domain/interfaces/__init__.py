"""
Domain Interfaces (Ports)
"""

from .sources import RiskScoreSource

__all__ = [
    "RiskScoreSource",
]
