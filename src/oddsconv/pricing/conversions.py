"""Conversions between American, decimal and fractional odds.

Pure math — no I/O.  Every conversion validates its source first, pivots
to decimal, then projects onto the target format:

    American → decimal:   +a → a/100 + 1      -a → 100/a + 1
    fractional → decimal: n/d + 1
    decimal → American:   d >= 2.0 → +(d − 1)·100   d < 2.0 → −100/(d − 1)
    decimal → fractional: (d − 1) as a reduced integer ratio

Even money (decimal 2.0) always maps to +100.
"""

from __future__ import annotations

import math
from fractions import Fraction

from oddsconv.config.settings import settings
from oddsconv.pricing.errors import ValueOutOfRange
from oddsconv.pricing.formats import OddsFormat
from oddsconv.pricing.validation import (
    validate_american,
    validate_decimal,
    validate_fractional,
    validate_value,
)


# ── Helpers ──────────────────────────────────────────────────────────

def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """Reduce to lowest terms with integer GCD.  0/n reduces to 0/1."""
    divisor = math.gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


def _project_american(decimal_odds: float) -> int:
    profit = decimal_odds - 1.0
    if decimal_odds >= 2.0:
        american = round_half_away(profit * 100.0)
    elif profit > 0.0:
        american = round_half_away(-100.0 / profit)
    else:
        raise ValueOutOfRange(
            f"Decimal odds of {decimal_odds} have no American equivalent"
        )

    if abs(american) > settings.american_max:
        raise ValueOutOfRange(
            f"Decimal odds {decimal_odds} project outside the American range: {american:+d}"
        )
    return american


def _project_fractional(profit: Fraction) -> tuple[int, int]:
    # limit_denominator returns lowest terms already
    ratio = profit.limit_denominator(settings.fraction_max_denominator)
    numerator, denominator = reduce_fraction(ratio.numerator, ratio.denominator)
    if numerator > settings.fractional_max or denominator > settings.fractional_max:
        raise ValueOutOfRange(
            f"Fractional projection too large: {numerator}/{denominator}"
        )
    return numerator, denominator


# ── American source ─────────────────────────────────────────────────

def american_to_decimal(value: int) -> float:
    """Convert American odds to decimal.

    Examples:
        +150 → 2.5
        -200 → 1.5
        -110 → 1.9091
    """
    validate_american(value)
    if value > 0:
        return value / 100 + 1
    return 100 / -value + 1


def american_to_fractional(value: int) -> tuple[int, int]:
    """Convert American odds to reduced fractional odds (+150 → 3/2, -110 → 10/11)."""
    validate_american(value)
    profit = Fraction(value, 100) if value > 0 else Fraction(100, -value)
    return _project_fractional(profit)


# ── Decimal source ──────────────────────────────────────────────────

def decimal_to_american(value: float) -> int:
    """Convert decimal odds to American odds.

    Raises:
        ValueOutOfRange: For decimal 1.0, or when the projection exceeds
            settings.american_max.
    """
    validate_decimal(value)
    return _project_american(float(value))


def decimal_to_fractional(value: float) -> tuple[int, int]:
    """Convert decimal odds to the closest reduced fraction (2.5 → 3/2).

    The decimal is read from its shortest literal so 2.1 becomes 11/10
    rather than the binary expansion of 1.1.
    """
    validate_decimal(value)
    profit = Fraction(str(float(value))) - 1
    return _project_fractional(profit)


# ── Fractional source ───────────────────────────────────────────────

def fractional_to_decimal(numerator: int, denominator: int) -> float:
    """Convert fractional odds to decimal (3/2 → 2.5, 0/1 → 1.0)."""
    validate_fractional(numerator, denominator)
    return numerator / denominator + 1


def fractional_to_american(numerator: int, denominator: int) -> int:
    """Convert fractional odds to American (3/2 → +150, 1/2 → -200)."""
    return _project_american(fractional_to_decimal(numerator, denominator))


# ── Dispatch on OddsFormat ──────────────────────────────────────────

def to_decimal(fmt: OddsFormat, value) -> float:
    """Validate then normalise any odds to decimal (the common pivot)."""
    if fmt is OddsFormat.AMERICAN:
        return american_to_decimal(value)
    if fmt is OddsFormat.FRACTIONAL:
        return fractional_to_decimal(*value)
    validate_value(fmt, value)
    return float(value)


def to_american(fmt: OddsFormat, value) -> int:
    if fmt is OddsFormat.AMERICAN:
        validate_american(value)
        return value
    return _project_american(to_decimal(fmt, value))


def to_fractional(fmt: OddsFormat, value) -> tuple[int, int]:
    if fmt is OddsFormat.FRACTIONAL:
        validate_fractional(*value)
        return reduce_fraction(*value)
    if fmt is OddsFormat.AMERICAN:
        return american_to_fractional(value)
    return decimal_to_fractional(value)
