"""
Oversize Rule

Rejects packages whose width + height + length exceeds 50.
No lower bound: zero and negative dimensions are accepted.
"""

from package_express.data import MAX_DIMENSIONS, messages
from .base import Rule


class Oversize(Rule):
    """Summed dimensions above the maximum."""

    # Identity
    name = "OVERSIZE"

    # Limit (a sum of exactly MAX_DIMENSIONS is accepted)
    threshold = MAX_DIMENSIONS

    message = messages.TOO_BIG
