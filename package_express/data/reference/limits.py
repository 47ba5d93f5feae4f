"""
Package Limits Configuration

Package Express acceptance limits and quote formula constants.
"""

# Acceptance limits (strictly greater than is rejected)
MAX_WEIGHT = 50               # Maximum package weight
MAX_DIMENSIONS = 50           # Maximum width + height + length

# Quote = (width * height * length * weight) / QUOTE_DIVISOR
QUOTE_DIVISOR = 100
