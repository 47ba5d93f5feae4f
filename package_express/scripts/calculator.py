"""
Package Express Shipping Quote Calculator
=========================================

Interactive CLI tool to quote shipping for a single package.

Usage:
    python -m package_express.scripts.calculator
    package-express
"""

from package_express.application import ShippingQuoteApplication
from package_express.data import messages
from package_express.inputs import ConsoleInputService
from package_express.quote import ShippingQuoteService
from package_express.validation import PackageValidationService


def build_application() -> ShippingQuoteApplication:
    """Wire the console services into a quote session."""
    return ShippingQuoteApplication(
        ConsoleInputService(),
        PackageValidationService(),
        ShippingQuoteService(),
    )


def main():
    """Main entry point."""
    try:
        app = build_application()
        app.start()

    except (KeyboardInterrupt, EOFError):
        print(f"\n{messages.CANCELLED}")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
