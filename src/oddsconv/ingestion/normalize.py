"""Normalise raw odds quotes supplied in mixed formats.

No DB code, no network calls — pure transformation.  Bad quotes are
collected, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from oddsconv.pricing.errors import OddsError, ValueOutOfRange
from oddsconv.pricing.formats import OddsFormat
from oddsconv.pricing.odds import Odds, format_odds

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NormalizedPrice:
    """One accepted quote rendered in every format."""

    source: str
    format: OddsFormat      # notation the quote was written in
    american: int | None    # None when no American equivalent (decimal 1.0)
    decimal: float
    fractional: str         # "num/den" in lowest terms
    implied_prob: float


@dataclass(frozen=True, slots=True)
class RejectedQuote:
    source: str
    error: OddsError


@dataclass(slots=True)
class NormalizationResult:
    prices: list[NormalizedPrice] = field(default_factory=list)
    rejected: list[RejectedQuote] = field(default_factory=list)


def normalize_odds(odds: Odds, source: str | None = None) -> NormalizedPrice:
    """Render one odds value in every format.

    Raises:
        OddsError: If the value fails validation.
    """
    decimal = odds.to_decimal()
    try:
        american = odds.to_american()
    except ValueOutOfRange:
        # decimal 1.0 and prices too short to express as a moneyline
        american = None
    numerator, denominator = odds.to_fractional()

    return NormalizedPrice(
        source=source if source is not None else format_odds(odds),
        format=odds.format,
        american=american,
        decimal=round(decimal, 6),
        fractional=f"{numerator}/{denominator}",
        implied_prob=round(1.0 / decimal, 6),
    )


def normalize_quotes(quotes: Iterable[str]) -> NormalizationResult:
    """Parse and normalise a batch of odds strings.

    Args:
        quotes: Raw odds text, e.g. ["+150", "2.50", "3/2"].

    Returns:
        NormalizationResult with one NormalizedPrice per accepted quote and
        one RejectedQuote per failure, both in input order.
    """
    result = NormalizationResult()

    for raw in quotes:
        try:
            odds = Odds.parse(raw)
            result.prices.append(normalize_odds(odds, source=raw.strip()))
        except OddsError as exc:
            logger.warning("Rejected odds quote %r: %s", raw, exc)
            result.rejected.append(RejectedQuote(source=raw, error=exc))

    logger.info(
        "normalize_quotes: %d accepted, %d rejected",
        len(result.prices), len(result.rejected),
    )
    return result
