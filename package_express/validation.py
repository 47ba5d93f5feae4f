"""
Package Validation

Checks a package against the Package Express acceptance rules.

Weight and dimensions are checked separately so the quote session can stop
as soon as the weight is rejected, before asking for dimensions.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple

from .rules import Overweight, Oversize


class ValidationResult(NamedTuple):
    """Outcome of one rule check. Invalid results always carry a reason."""
    is_valid: bool
    reason: str | None = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(True, None)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        if not reason:
            raise ValueError("Invalid result requires a reason")
        return cls(False, reason)


class ValidationService(ABC):
    """Weight and dimension checks for the quote session."""

    @abstractmethod
    def validate_weight(self, weight: float) -> ValidationResult:
        ...

    @abstractmethod
    def validate_dimensions(
        self,
        width: float,
        height: float,
        length: float,
    ) -> ValidationResult:
        ...


class PackageValidationService(ValidationService):
    """Validation service backed by the Overweight and Oversize rules."""

    def validate_weight(self, weight: float) -> ValidationResult:
        if Overweight.violated(weight):
            return ValidationResult.invalid(Overweight.message)
        return ValidationResult.valid()

    def validate_dimensions(
        self,
        width: float,
        height: float,
        length: float,
    ) -> ValidationResult:
        if Oversize.violated(width, height, length):
            return ValidationResult.invalid(Oversize.message)
        return ValidationResult.valid()
