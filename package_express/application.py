"""
Shipping Quote Application

Runs one interactive quote session:

    1. Welcome
    2. Weight      - read, validate (stop if rejected)
    3. Dimensions  - read width, height, length in that order
    4. Validate dimensions (stop if rejected)
    5. Quote       - calculate and print, then thank the user

A rejected package ends the session. There is no retry; the user starts the
program again to quote another package.

USAGE
-----
    app = ShippingQuoteApplication(
        ConsoleInputService(),
        PackageValidationService(),
        ShippingQuoteService(),
    )
    app.start()
"""

import sys
from typing import TextIO

from .data import messages
from .inputs import InputService
from .quote import QuoteService, format_quote
from .validation import ValidationService


class ShippingQuoteApplication:
    """Coordinates input, validation and quoting for one package."""

    def __init__(
        self,
        input_service: InputService,
        validation_service: ValidationService,
        quote_service: QuoteService,
        output_stream: TextIO | None = None,
    ):
        self._input_service = input_service
        self._validation_service = validation_service
        self._quote_service = quote_service
        self._output = output_stream

    def start(self) -> float | None:
        """
        Run the quote session.

        Returns:
            The quote, or None if the package was rejected
        """
        self._print(messages.WELCOME)

        weight = self._input_service.get_numeric_input(messages.WEIGHT_PROMPT)
        result = self._validation_service.validate_weight(weight)
        if not result.is_valid:
            self._print(result.reason)
            return None

        width = self._input_service.get_numeric_input(messages.WIDTH_PROMPT)
        height = self._input_service.get_numeric_input(messages.HEIGHT_PROMPT)
        length = self._input_service.get_numeric_input(messages.LENGTH_PROMPT)

        result = self._validation_service.validate_dimensions(width, height, length)
        if not result.is_valid:
            self._print(result.reason)
            return None

        quote = self._quote_service.calculate_quote(weight, width, height, length)
        self._print(format_quote(quote))
        self._print(messages.THANK_YOU)
        return quote

    def _print(self, text: str) -> None:
        output_stream = self._output if self._output is not None else sys.stdout
        print(text, file=output_stream)
