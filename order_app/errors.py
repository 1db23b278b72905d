# order_app/errors.py

from __future__ import annotations


class OrderAppError(Exception):
    """Base class for errors raised by order_app."""


class ConfigError(OrderAppError, ValueError):
    pass


class InputParseError(OrderAppError, ValueError):
    """
    Raised when console text cannot be turned into a valid menu choice or amount.

    `kind` names the rejection ("not_an_integer", "out_of_range",
    "not_a_number", "not_positive") so callers can log it without parsing
    the message.
    """

    def __init__(self, kind: str, text: str | None) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"{kind}: {text!r}")


class InvalidPaymentOptionError(OrderAppError, RuntimeError):
    """No payment processor is registered for the requested payment method."""
