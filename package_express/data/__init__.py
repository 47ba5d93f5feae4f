"""
Package Express Data

Limits and console messages used by the quote calculator.
"""

from .reference.limits import MAX_WEIGHT, MAX_DIMENSIONS, QUOTE_DIVISOR
from .reference import messages

__all__ = [
    "MAX_WEIGHT",
    "MAX_DIMENSIONS",
    "QUOTE_DIVISOR",
    "messages",
]
