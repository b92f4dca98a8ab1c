"""Text parsers for the lenient scalar kinds.

Each parser is strict about its own grammar and raises
:class:`~strval.errors.ParseError` on anything else; leniency lives one
level up in :mod:`strval.domain.coercion`, which decides what a failure
turns into.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from strval.errors import ParseError

TRUE_WORDS = frozenset({"true", "yes", "y", "1"})
FALSE_WORDS = frozenset({"false", "no", "n", "0"})

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
      | inf(?:inity)?
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)

# Integral floats at or above this magnitude render in exponent form.
_PLAIN_FLOAT_LIMIT = 1e21


def parse_bool(text: str) -> bool:
    """Parse a boolean word.

    Surrounding whitespace is stripped and case is ignored.

    - truthy: ``true``, ``yes``, ``y``, ``1``
    - falsy: ``false``, ``no``, ``n``, ``0``

    Raises:
        ParseError: For any other word. ``exc.text`` holds the normalized text.
    """
    normalized = text.strip().lower()
    if normalized in TRUE_WORDS:
        return True
    if normalized in FALSE_WORDS:
        return False
    msg = f"cannot parse '{normalized}' as bool"
    raise ParseError(msg, text=normalized, kind="bool")


def check_int64(value: int) -> int:
    """Return *value* unchanged if it fits a signed 64-bit integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        msg = f"'{value}' is out of range for int"
        raise ParseError(msg, text=str(value), kind="int")
    return value


def parse_int(text: str) -> int:
    """Parse a base-10 integer with an optional sign.

    No whitespace, digit separators, or non-ASCII digits are accepted.

    Raises:
        ParseError: On malformed text or a value outside the 64-bit range.
    """
    if not _INT_RE.fullmatch(text):
        msg = f"cannot parse '{text}' as int"
        raise ParseError(msg, text=text, kind="int")
    return check_int64(int(text))


def float_from_decimal(value: Decimal) -> float:
    """Widen a Decimal to a double, rejecting finite values that overflow."""
    result = float(value)
    if math.isinf(result) and value.is_finite():
        msg = f"'{value}' is out of range for float"
        raise ParseError(msg, text=str(value), kind="float")
    return result


def parse_float(text: str) -> float:
    """Parse decimal or exponential float text.

    ``inf``, ``infinity`` and ``nan`` are accepted in any case with an
    optional sign. Finite text too large for a double is rejected rather
    than silently becoming infinity.

    Raises:
        ParseError: On malformed text or overflow.
    """
    if not _FLOAT_RE.fullmatch(text):
        msg = f"cannot parse '{text}' as float"
        raise ParseError(msg, text=text, kind="float")
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        msg = f"'{text}' is out of range for float"
        raise ParseError(msg, text=text, kind="float")
    return value


def format_number(value: int | float) -> str:
    """Render a number as its shortest round-tripping decimal text.

    >>> format_number(123), format_number(123.45), format_number(1.0)
    ('123', '123.45', '1')
    """
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _PLAIN_FLOAT_LIMIT:
        return str(int(value))
    return repr(value)
