"""
Overweight Rule

Rejects packages heavier than 50.
"""

from package_express.data import MAX_WEIGHT, messages
from .base import Rule


class Overweight(Rule):
    """Package weight above the maximum."""

    # Identity
    name = "OVERWEIGHT"

    # Limit (exactly MAX_WEIGHT is accepted)
    threshold = MAX_WEIGHT

    message = messages.TOO_HEAVY

    @classmethod
    def measure(cls, weight: float) -> float:
        return weight
