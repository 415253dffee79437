"""Unified odds value: one of American, decimal or fractional.

Construction never rejects — values are stored as given so callers can
build, inspect and validate at will.  Every conversion, probability and
rendering validates first and raises the matching OddsError on bad data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from oddsconv.pricing import conversions, text
from oddsconv.pricing.formats import OddsFormat
from oddsconv.pricing.implied_prob import implied_probability
from oddsconv.pricing.validation import validate_value

OddsPayload = Union[int, float, tuple[int, int]]


@dataclass(frozen=True, slots=True)
class Odds:
    """An odds value tagged with its format.

    value is an int (American), a float (decimal) or a
    (numerator, denominator) tuple (fractional).
    """

    format: OddsFormat
    value: OddsPayload

    # ── Factories ──────────────────────────────────────────────────

    @classmethod
    def american(cls, value: int) -> Odds:
        return cls(OddsFormat.AMERICAN, value)

    @classmethod
    def decimal(cls, value: float) -> Odds:
        return cls(OddsFormat.DECIMAL, value)

    @classmethod
    def fractional(cls, numerator: int, denominator: int) -> Odds:
        return cls(OddsFormat.FRACTIONAL, (numerator, denominator))

    @classmethod
    def parse(cls, raw: str) -> Odds:
        """Parse and validate odds text ("+150", "2.50", "3/2").

        Raises:
            ParseError: Unrecognised notation.
            OddsError: Well-formed but invalid value, e.g. "0.5" raises
                InvalidDecimalOdds and "3/0" raises ZeroDenominator.
        """
        fmt, value = text.split_notation(raw)
        odds = cls(fmt, value)
        odds.validate()
        return odds

    # ── Validation ─────────────────────────────────────────────────

    def validate(self) -> None:
        """Raise the matching OddsError if the stored value is out of range."""
        validate_value(self.format, self.value)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    # ── Conversions ────────────────────────────────────────────────

    def to_american(self) -> int:
        return conversions.to_american(self.format, self.value)

    def to_decimal(self) -> float:
        return conversions.to_decimal(self.format, self.value)

    def to_fractional(self) -> tuple[int, int]:
        """Return (numerator, denominator) in lowest terms."""
        return conversions.to_fractional(self.format, self.value)

    def convert(self, target: OddsFormat) -> Odds:
        """Return a new value in *target* format."""
        target = OddsFormat(target)
        if target is OddsFormat.AMERICAN:
            return Odds.american(self.to_american())
        if target is OddsFormat.DECIMAL:
            return Odds.decimal(self.to_decimal())
        return Odds.fractional(*self.to_fractional())

    def implied_probability(self) -> float:
        return implied_probability(self)

    # ── Text ───────────────────────────────────────────────────────

    def __str__(self) -> str:
        return format_odds(self)


def new_american(value: int) -> Odds:
    return Odds.american(value)


def new_decimal(value: float) -> Odds:
    return Odds.decimal(value)


def new_fractional(numerator: int, denominator: int) -> Odds:
    return Odds.fractional(numerator, denominator)


def parse_odds(raw: str) -> Odds:
    return Odds.parse(raw)


def format_odds(odds: Odds) -> str:
    """Render valid odds as +150 / 2.50 / 3/2.

    Raises:
        OddsError: If the value fails validation; invalid data is never
            rendered.
    """
    odds.validate()
    return text.render(odds.format, odds.value)
