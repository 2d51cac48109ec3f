"""Input validators - parse raw operator text into typed values.

SDK layer - pure functions, no I/O. Each parser either returns the typed
value or raises an error from ``payroll.sdk.errors``.

The lexical rules are deliberately narrower than Python's own parsers:
``int()`` accepts surrounding whitespace, underscores and non-ASCII digits,
and ``Decimal()`` accepts signs, exponents and any number of fractional
digits. None of those are valid operator input here.
"""

import re
from decimal import Decimal

from .errors import FormatError, RangeError


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
_ID_RE = re.compile(r"[A-Za-z0-9]+")


def parse_integer(text: str) -> int:
    """Parse a base-10 integer literal.

    The whole text must be an optional sign followed by ASCII digits.

    Args:
        text: Raw operator input

    Returns:
        The parsed integer

    Raises:
        FormatError: If any part of the text is not part of the literal
    """
    if not _INTEGER_RE.fullmatch(text):
        raise FormatError(f"Not an integer: {text!r}")
    return int(text)


def parse_menu_choice(text: str, minimum: int, maximum: int) -> int:
    """Parse a menu selection within an inclusive range.

    Raises:
        FormatError: If the text contains a space or is not an integer
        RangeError: If the integer is outside [minimum, maximum]
    """
    if " " in text:
        raise FormatError(f"Menu choice contains spaces: {text!r}")

    choice = parse_integer(text)
    if choice < minimum or choice > maximum:
        raise RangeError(f"Menu choice {choice} not between {minimum} and {maximum}")
    return choice


def parse_decimal(text: str) -> Decimal:
    """Parse an unsigned decimal with at most two fractional digits.

    Accepts "12", "12.5" and "12.50"; rejects "12.345", "-1.5", "1e3",
    "1,000" and ".5".
    """
    if not _DECIMAL_RE.fullmatch(text):
        raise FormatError(f"Not a decimal with up to two places: {text!r}")
    return Decimal(text)


def validate_id(text: str) -> bool:
    """Check that an employee ID is non-empty ASCII letters and digits only."""
    return bool(_ID_RE.fullmatch(text))
