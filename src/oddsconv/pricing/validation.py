"""Format-specific range and shape checks.

Pure checks over raw values — each raises the matching OddsError subclass
and returns None when the value is usable.  Ceilings are read from settings
at call time.
"""

from __future__ import annotations

import math
from numbers import Real

from oddsconv.config.settings import settings
from oddsconv.pricing.errors import (
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    InvalidFractionalOdds,
    ValueOutOfRange,
    ZeroDenominator,
)
from oddsconv.pricing.formats import OddsFormat


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_american(value: int) -> None:
    """Check American odds.

    ±100 are the boundaries: 0 and anything with magnitude below 100
    (e.g. +99, -50) are rejected.

    Raises:
        InvalidAmericanOdds: Not an integer, zero, or |value| < 100.
        ValueOutOfRange: |value| above settings.american_max.
    """
    if not _is_int(value):
        raise InvalidAmericanOdds(f"American odds must be an integer, got: {value!r}")
    if value == 0:
        raise InvalidAmericanOdds("American odds cannot be zero")
    if abs(value) < 100:
        raise InvalidAmericanOdds(
            f"American odds must be at least 100 in magnitude, got: {value:+d}"
        )
    if abs(value) > settings.american_max:
        raise ValueOutOfRange(f"American odds out of reasonable range: {value:+d}")


def validate_decimal(value: float) -> None:
    """Check decimal odds: finite and within [1.0, settings.decimal_max].

    Raises:
        InvalidDecimalOdds: Not a real number, NaN, infinite, or below 1.0.
        ValueOutOfRange: Above settings.decimal_max.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDecimalOdds(f"Decimal odds must be a number, got: {value!r}")
    if not math.isfinite(value):
        raise InvalidDecimalOdds(f"Decimal odds must be finite, got: {value}")
    if value < 1.0:
        raise InvalidDecimalOdds(f"Decimal odds must be >= 1.0, got: {value}")
    if value > settings.decimal_max:
        raise ValueOutOfRange(f"Decimal odds too large: {value}")


def validate_fractional(numerator: int, denominator: int) -> None:
    """Check fractional odds.

    A zero denominator always wins over any other defect.  A zero
    numerator is valid (zero profit, same as decimal 1.0).

    Raises:
        ZeroDenominator: denominator == 0.
        InvalidFractionalOdds: Non-integer or negative component.
        ValueOutOfRange: Either component above settings.fractional_max.
    """
    if denominator == 0:
        raise ZeroDenominator()
    if not (_is_int(numerator) and _is_int(denominator)):
        raise InvalidFractionalOdds(
            f"Fractional odds need integer parts, got: {numerator!r}/{denominator!r}"
        )
    if numerator < 0 or denominator < 0:
        raise InvalidFractionalOdds(
            f"Fractional odds cannot be negative, got: {numerator}/{denominator}"
        )
    if numerator > settings.fractional_max or denominator > settings.fractional_max:
        raise ValueOutOfRange(
            f"Fractional odds values too large: {numerator}/{denominator}"
        )


def validate_value(fmt: OddsFormat, value) -> None:
    """Dispatch to the check for *fmt*."""
    if fmt is OddsFormat.AMERICAN:
        validate_american(value)
    elif fmt is OddsFormat.DECIMAL:
        validate_decimal(value)
    elif fmt is OddsFormat.FRACTIONAL:
        numerator, denominator = value
        validate_fractional(numerator, denominator)
    else:
        raise ValueError(f"Unknown odds format: {fmt!r}")
