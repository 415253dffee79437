"""Odds → implied probability.

Pure math — no DB, no network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from oddsconv.pricing.conversions import (
    american_to_decimal,
    fractional_to_decimal,
)
from oddsconv.pricing.validation import validate_decimal

if TYPE_CHECKING:
    from oddsconv.pricing.odds import Odds


def decimal_to_implied(odds: float) -> float:
    """Break-even probability for decimal odds, in (0, 1].

    Examples:
        2.0 → 0.5
        1.0 → 1.0

    Raises:
        InvalidDecimalOdds / ValueOutOfRange: If the odds fail validation.
    """
    validate_decimal(odds)
    return 1.0 / odds


def american_to_implied(odds: int) -> float:
    """Convert American odds to an implied probability in (0, 1).

    Examples:
        -150 → 0.6000   (favourite)
        +130 → 0.4348   (underdog)
        -110 → 0.5238   (standard vig line)

    Raises:
        InvalidAmericanOdds: If odds is zero or inside (-100, 100).
    """
    return 1.0 / american_to_decimal(odds)


def fractional_to_implied(numerator: int, denominator: int) -> float:
    """Convert fractional odds to an implied probability (3/2 → 0.4)."""
    return 1.0 / fractional_to_decimal(numerator, denominator)


def implied_probability(odds: Odds) -> float:
    """Implied probability of any odds value, computed as 1 / decimal."""
    return 1.0 / odds.to_decimal()
