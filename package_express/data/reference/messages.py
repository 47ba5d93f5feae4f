"""
Console Messages

User-facing text for the Package Express quote session.
"""

WELCOME = "Welcome to Package Express. Please follow the instructions below."
THANK_YOU = "Thank you!"
CANCELLED = "Cancelled."

# Prompts, in the order they are asked
WEIGHT_PROMPT = "Please enter the package weight:"
WIDTH_PROMPT = "Please enter the package width:"
HEIGHT_PROMPT = "Please enter the package height:"
LENGTH_PROMPT = "Please enter the package length:"

INVALID_NUMBER = "Invalid input. Please enter a valid number."

# Rejections
TOO_HEAVY = "Package too heavy to be shipped via Package Express. Have a good day."
TOO_BIG = "Package too big to be shipped via Package Express."

QUOTE_TEMPLATE = "Your estimated total for shipping this package is: ${quote:.2f}"
