"""
Package Express Rules

Exports all acceptance rule classes.

Rules are independent: each is checked on its own by the validation service
and any one of them can end the quote session.

Usage:
    from package_express.rules import ALL, Overweight, Oversize
"""

from .base import Rule
from .overweight import Overweight
from .oversize import Oversize


# All rules - add classes here as they are implemented
ALL: list[type[Rule]] = [Overweight, Oversize]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_rules() -> None:
    """
    Validate rule configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen = set()

    for r in ALL:
        name = getattr(r, "name", None)
        if not name:
            errors.append(f"{r.__name__}: name is required")
        elif name in seen:
            errors.append(f"{name}: duplicate rule name")
        else:
            seen.add(name)

        if getattr(r, "threshold", None) is None:
            errors.append(f"{r.__name__}: threshold is required")

        if not getattr(r, "message", None):
            errors.append(f"{r.__name__}: message is required")

    if errors:
        raise ValueError("Rule configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_rules()

__all__ = [
    # Base
    "Rule",
    # Rule classes
    "Overweight",
    "Oversize",
    # Groups
    "ALL",
    # Functions
    "validate_rules",
]
