"""
Rule Base Class

Shared base class for Package Express acceptance rules.
"""

from abc import ABC


# =============================================================================
# BASE CLASS
# =============================================================================

class Rule(ABC):
    """
    Base class for all acceptance rules.

    Attributes:
        IDENTITY
            name        - Short code (e.g., "OVERWEIGHT")

        LIMIT
            threshold   - Largest accepted value (values above are rejected)

        MESSAGE
            message     - Text shown to the user when the rule rejects a package
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # LIMIT
    # -------------------------------------------------------------------------
    threshold: float

    # -------------------------------------------------------------------------
    # MESSAGE
    # -------------------------------------------------------------------------
    message: str

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def measure(cls, *values: float) -> float:
        """
        Value compared against the threshold.

        Default is the sum of the given measurements.
        """
        return sum(values)

    @classmethod
    def violated(cls, *values: float) -> bool:
        """True if the measured value is strictly above the threshold."""
        return cls.measure(*values) > cls.threshold
