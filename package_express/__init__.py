"""
Package Express

Interactive shipping quote calculator for a single package.
"""

from .application import ShippingQuoteApplication
from .inputs import ConsoleInputService, InputService
from .quote import QuoteService, ShippingQuoteService, calculate_quote
from .validation import PackageValidationService, ValidationResult, ValidationService
from .version import VERSION

__all__ = [
    "ShippingQuoteApplication",
    "InputService",
    "ConsoleInputService",
    "ValidationService",
    "PackageValidationService",
    "ValidationResult",
    "QuoteService",
    "ShippingQuoteService",
    "calculate_quote",
    "VERSION",
]
