"""Tests for single-market summaries — all synthetic prices."""

import pytest

from oddsconv.pricing.errors import InvalidAmericanOdds
from oddsconv.pricing.market import (
    BookQuote,
    MarketOutcome,
    best_price_per_outcome,
    favourite,
    overround,
    total_implied_probability,
)
from oddsconv.pricing.odds import Odds


def _outcome(name: str, raw: str) -> MarketOutcome:
    return MarketOutcome(name=name, odds=Odds.parse(raw))


class TestBookMargin:
    def test_standard_vig_line(self):
        # -110 / -110 → 0.5238 + 0.5238 = 1.0476
        market = [_outcome("Duke", "-110"), _outcome("UNC", "-110")]
        assert total_implied_probability(market) == pytest.approx(1.0476, abs=1e-4)
        assert overround(market) == pytest.approx(0.0476, abs=1e-4)

    def test_fair_market(self):
        market = [_outcome("Duke", "+100"), _outcome("UNC", "2.0")]
        assert overround(market) == pytest.approx(0.0)

    def test_three_way_mixed_formats(self):
        # home 2.10, draw 13/4, away +280
        market = [_outcome("Home", "2.10"), _outcome("Draw", "13/4"), _outcome("Away", "+280")]
        expected = 1 / 2.10 + 1 / 4.25 + 1 / 3.80
        assert total_implied_probability(market) == pytest.approx(expected)

    def test_empty_market(self):
        assert total_implied_probability([]) == 0.0

    def test_invalid_odds_propagate(self):
        with pytest.raises(InvalidAmericanOdds):
            overround([MarketOutcome("Duke", Odds.american(0))])


class TestFavourite:
    def test_picks_shortest_price(self):
        market = [_outcome("Horse 1", "2/1"), _outcome("Horse 2", "5/2"), _outcome("Horse 3", "6/4")]
        assert favourite(market).name == "Horse 3"

    def test_tie_keeps_first(self):
        market = [_outcome("Duke", "-110"), _outcome("UNC", "10/11")]
        assert favourite(market).name == "Duke"

    def test_empty(self):
        assert favourite([]) is None


class TestBestPricePerOutcome:
    def test_highest_decimal_wins_across_formats(self):
        quotes = [
            BookQuote("book_a", "Duke", Odds.american(-120)),
            BookQuote("book_b", "Duke", Odds.decimal(2.05)),   # best
            BookQuote("book_c", "Duke", Odds.fractional(10, 11)),
            BookQuote("book_a", "UNC", Odds.american(105)),    # best
            BookQuote("book_b", "UNC", Odds.decimal(1.80)),
        ]
        best = best_price_per_outcome(quotes)
        assert best["Duke"].bookmaker == "book_b"
        assert best["UNC"].bookmaker == "book_a"

    def test_empty(self):
        assert best_price_per_outcome([]) == {}
