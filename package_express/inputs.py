"""
Numeric Input

Reads measurements from the user one line at a time.

Malformed entries are never surfaced as errors: the reader prints a retry
message and asks again until it gets a real number. Range checks are left to
the validation service, so zero and negative values are returned as entered.
"""

import math
import re
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .data import messages


# Plain ASCII decimal with optional sign and exponent (no digit separators)
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


# =============================================================================
# HELPERS
# =============================================================================

def parse_number(text: str) -> float:
    """
    Parse one line of user input as a real number.

    Args:
        text: Raw line, surrounding whitespace allowed

    Returns:
        Parsed value

    Raises:
        ValueError: If the text is empty, not a plain decimal number, or not finite
    """
    text = text.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")

    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


# =============================================================================
# INPUT SERVICES
# =============================================================================

class InputService(ABC):
    """Source of numeric values for the quote session."""

    @abstractmethod
    def get_numeric_input(self, prompt: str) -> float:
        """Show prompt and return the number the user enters."""


class ConsoleInputService(InputService):
    """
    Console-backed input service.

    Streams default to sys.stdin / sys.stdout, looked up on each call.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ):
        self._input = input_stream
        self._output = output_stream

    def get_numeric_input(self, prompt: str) -> float:
        """
        Prompt until the user enters a valid number.

        Raises:
            EOFError: If the input stream has no more lines
        """
        input_stream = self._input if self._input is not None else sys.stdin
        output_stream = self._output if self._output is not None else sys.stdout

        while True:
            print(prompt, file=output_stream, flush=True)
            line = input_stream.readline()
            if not line:
                raise EOFError("no more input")
            try:
                return parse_number(line)
            except ValueError:
                print(messages.INVALID_NUMBER, file=output_stream)
