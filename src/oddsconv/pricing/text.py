"""Text notation for odds: syntax detection and rendering.

    +150 / -110   American (sign required)
    2.50          decimal (must contain a '.')
    3/2           fractional

A bare unsigned integer such as "150" is rejected: it could be American
with a missing sign or decimal with a missing point.
"""

from __future__ import annotations

import re

from oddsconv.pricing.conversions import reduce_fraction
from oddsconv.pricing.errors import ParseError, ValueOutOfRange
from oddsconv.pricing.formats import OddsFormat

_AMERICAN_RE = re.compile(r"[+-][0-9]+")
_DECIMAL_RE = re.compile(r"[0-9]+\.[0-9]*|\.[0-9]+")
_FRACTIONAL_RE = re.compile(r"([0-9]+)\s*/\s*([0-9]+)")

# Significant digits allowed in any integer run; far above every ceiling
_MAX_DIGITS = 12


def _check_digits(digits: str, s: str) -> None:
    if len(digits.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        shown = s if len(s) <= 24 else s[:20] + "..."
        raise ValueOutOfRange(f"Too many digits in odds '{shown}'")


def split_notation(text: str) -> tuple[OddsFormat, int | float | tuple[int, int]]:
    """Detect the notation of *text* and return (format, raw value).

    Only syntax is checked here; range checks are left to validation.

    Raises:
        ParseError: If *text* matches no recognised notation.
        ValueOutOfRange: If a digit run is too long to be a sane price.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got: {type(text).__name__}")

    s = text.strip()
    if not s:
        raise ParseError("Empty string")

    if _AMERICAN_RE.fullmatch(s):
        _check_digits(s, s)
        return OddsFormat.AMERICAN, int(s)

    m = _FRACTIONAL_RE.fullmatch(s)
    if m:
        _check_digits(m.group(1), s)
        _check_digits(m.group(2), s)
        return OddsFormat.FRACTIONAL, (int(m.group(1)), int(m.group(2)))

    if _DECIMAL_RE.fullmatch(s):
        _check_digits(s.partition(".")[0], s)
        return OddsFormat.DECIMAL, float(s)

    if s.isdigit():
        raise ParseError(
            f"Ambiguous odds '{s}': prefix American odds with '+' or '-', "
            f"or write decimal odds with a '.'"
        )
    if "/" in s:
        raise ParseError(f"Invalid fractional format, expected 'num/den': '{s}'")
    if s[0] in "+-":
        raise ParseError(f"Invalid American odds format: '{s}'")
    raise ParseError(f"Unable to parse '{s}' as any odds format")


def render(fmt: OddsFormat, value) -> str:
    """Render a raw value in its canonical notation (+150, 2.50, 3/2)."""
    if fmt is OddsFormat.AMERICAN:
        return f"{value:+d}"
    if fmt is OddsFormat.DECIMAL:
        return f"{value:.2f}"
    numerator, denominator = reduce_fraction(*value)
    return f"{numerator}/{denominator}"
