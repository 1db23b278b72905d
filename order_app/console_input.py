# order_app/console_input.py

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Callable, Collection, TypeVar

from order_app.errors import InputParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Reader = Callable[[str], str]

# Plain digits only: no underscores, exponents, or NaN/Infinity spellings.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)")


def parse_choice(text: str | None, allowed: Collection[int]) -> int:
    """Parse a menu choice; the value must be one of `allowed`."""
    if text is None:
        raise InputParseError("not_an_integer", text)
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise InputParseError("not_an_integer", text)
    value = int(stripped)

    if value not in allowed:
        raise InputParseError("out_of_range", text)
    return value


def parse_amount(text: str | None) -> Decimal:
    """Parse a payment amount; it must be a finite decimal greater than zero."""
    if text is None:
        raise InputParseError("not_a_number", text)
    stripped = text.strip()
    if not _DECIMAL_RE.fullmatch(stripped):
        raise InputParseError("not_a_number", text)
    value = Decimal(stripped)

    if value <= 0:
        raise InputParseError("not_positive", text)
    return value


def prompt_until_valid(
    prompt: str,
    retry_prompt: str,
    parse: Callable[[str], T],
    reader: Reader | None = None,
) -> T:
    """
    Read a line with `prompt` and keep asking with `retry_prompt` until
    `parse` accepts it.

    Rejected input is only logged; EOFError and KeyboardInterrupt from the
    reader propagate to the caller.
    """
    if reader is None:
        reader = input

    text = reader(prompt)
    while True:
        try:
            return parse(text)
        except InputParseError as exc:
            logger.debug("Rejected input %r (%s)", exc.text, exc.kind)
        text = reader(retry_prompt)
