"""Single-market summaries: book margin, favourite, best price per outcome.

Pure math over Odds values — no DB, no network.  Works on mixed formats;
every price is compared through its decimal equivalent.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from oddsconv.pricing.odds import Odds


@dataclass(frozen=True, slots=True)
class MarketOutcome:
    """One outcome of a betting market and its price."""

    name: str
    odds: Odds


@dataclass(frozen=True, slots=True)
class BookQuote:
    """A bookmaker's price for one outcome."""

    bookmaker: str
    outcome: str
    odds: Odds


def total_implied_probability(outcomes: Iterable[MarketOutcome]) -> float:
    """Sum of implied probabilities; above 1.0 for any market carrying vig.

    Raises:
        OddsError: If any outcome's odds fail validation.
    """
    return sum(o.odds.implied_probability() for o in outcomes)


def overround(outcomes: Iterable[MarketOutcome]) -> float:
    """Bookmaker margin: total implied probability minus 1.

    Examples:
        -110 / -110 → 0.0476
        +100 / +100 → 0.0
    """
    return total_implied_probability(outcomes) - 1.0


def favourite(outcomes: Iterable[MarketOutcome]) -> MarketOutcome | None:
    """Outcome with the highest implied probability; None for an empty market.

    Ties keep the first outcome listed.
    """
    best: MarketOutcome | None = None
    best_prob = -1.0
    for o in outcomes:
        prob = o.odds.implied_probability()
        if prob > best_prob:
            best, best_prob = o, prob
    return best


def best_price_per_outcome(quotes: Iterable[BookQuote]) -> dict[str, BookQuote]:
    """Find the best (highest decimal) price for each outcome across books.

    Returns:
        {outcome_name: BookQuote}
    """
    best: dict[str, tuple[BookQuote, float]] = {}
    for q in quotes:
        decimal = q.odds.to_decimal()
        if q.outcome not in best or decimal > best[q.outcome][1]:
            best[q.outcome] = (q, decimal)
    return {outcome: quote for outcome, (quote, _) in best.items()}
