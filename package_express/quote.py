"""
Quote Calculation

quote = (width * height * length * weight) / 100

No rounding and no validation here: callers validate first, and formatting
to two decimals happens only when the quote is displayed. Negative inputs
give negative quotes.
"""

from abc import ABC, abstractmethod

from .data import QUOTE_DIVISOR, messages


def calculate_quote(weight: float, width: float, height: float, length: float) -> float:
    """Price for one package."""
    return (width * height * length * weight) / QUOTE_DIVISOR


def format_quote(quote: float) -> str:
    """Quote line shown to the user, two decimal places."""
    return messages.QUOTE_TEMPLATE.format(quote=quote)


class QuoteService(ABC):
    """Quote calculation for the quote session."""

    @abstractmethod
    def calculate_quote(
        self,
        weight: float,
        width: float,
        height: float,
        length: float,
    ) -> float:
        ...


class ShippingQuoteService(QuoteService):
    """Package Express pricing formula."""

    def calculate_quote(
        self,
        weight: float,
        width: float,
        height: float,
        length: float,
    ) -> float:
        return calculate_quote(weight, width, height, length)
