"""Failure taxonomy for odds validation, conversion and parsing.

Every error subclasses ValueError so existing `except ValueError` handlers
keep catching bad odds.
"""

from __future__ import annotations


class OddsError(ValueError):
    """Base class for every odds failure."""

    kind: str = "OddsError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}" if self.message else self.kind


class InvalidAmericanOdds(OddsError):
    """Zero, or magnitude strictly between 0 and 100."""

    kind = "InvalidAmericanOdds"


class InvalidDecimalOdds(OddsError):
    """Below 1.0, NaN or infinite."""

    kind = "InvalidDecimalOdds"


class InvalidFractionalOdds(OddsError):
    """Malformed numerator/denominator other than a zero denominator."""

    kind = "InvalidFractionalOdds"


class ZeroDenominator(OddsError):
    kind = "ZeroDenominator"

    def __init__(self, message: str = "Denominator cannot be zero") -> None:
        super().__init__(message)


class ParseError(OddsError):
    """Input text matches no recognised odds notation."""

    kind = "ParseError"


class ValueOutOfRange(OddsError):
    """Magnitude beyond a configured sanity ceiling."""

    kind = "ValueOutOfRange"
