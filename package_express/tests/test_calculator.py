"""
Tests for the Calculator Entry Point

Run with: pytest package_express/tests/test_calculator.py -v
"""

import io

import pytest

from package_express.application import ShippingQuoteApplication
from package_express.data import messages
from package_express.scripts import calculator


def feed_stdin(monkeypatch, *lines: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))


class TestMain:
    """Tests for calculator.main."""

    def test_build_application(self):
        assert isinstance(calculator.build_application(), ShippingQuoteApplication)

    def test_quote(self, monkeypatch, capsys):
        feed_stdin(monkeypatch, "10", "10", "10", "10")
        assert calculator.main() is None
        out = capsys.readouterr().out
        assert "Your estimated total for shipping this package is: $100.00" in out
        assert out.rstrip().endswith(messages.THANK_YOU)

    def test_rejection_returns_normally(self, monkeypatch, capsys):
        """Rejected packages end the program without an error."""
        feed_stdin(monkeypatch, "60")
        calculator.main()
        assert capsys.readouterr().out.rstrip().endswith(messages.TOO_HEAVY)

    def test_end_of_input_cancels(self, monkeypatch, capsys):
        """Input ending mid-session is treated as a cancellation."""
        feed_stdin(monkeypatch, "10", "10")
        calculator.main()
        assert capsys.readouterr().out.rstrip().endswith(messages.CANCELLED)

    def test_keyboard_interrupt_cancels(self, monkeypatch, capsys):
        def interrupt(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(ShippingQuoteApplication, "start", interrupt)
        calculator.main()
        assert capsys.readouterr().out == f"\n{messages.CANCELLED}\n"

    def test_unexpected_error_reraised(self, monkeypatch, capsys):
        def fail(self):
            raise RuntimeError("boom")

        monkeypatch.setattr(ShippingQuoteApplication, "start", fail)
        with pytest.raises(RuntimeError, match="boom"):
            calculator.main()
        assert "Error: boom" in capsys.readouterr().out
