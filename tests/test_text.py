"""Tests for parsing and rendering odds text."""

import pytest

from oddsconv.pricing.errors import (
    InvalidAmericanOdds,
    InvalidDecimalOdds,
    ParseError,
    ValueOutOfRange,
    ZeroDenominator,
)
from oddsconv.pricing.formats import OddsFormat
from oddsconv.pricing.odds import Odds, format_odds, parse_odds


class TestParse:
    def test_positive_american(self):
        assert parse_odds("+200") == Odds.american(200)

    def test_negative_american(self):
        assert parse_odds("-110") == Odds.american(-110)

    def test_decimal(self):
        assert parse_odds("2.50") == Odds.decimal(2.5)

    def test_decimal_without_leading_digit(self):
        # .5 is well-formed but below 1.0
        with pytest.raises(InvalidDecimalOdds):
            parse_odds(".5")

    def test_decimal_trailing_point(self):
        assert parse_odds("3.") == Odds.decimal(3.0)

    def test_fractional(self):
        assert parse_odds("3/2") == Odds.fractional(3, 2)

    def test_fractional_keeps_unreduced_parts(self):
        assert parse_odds("6/4").value == (6, 4)

    def test_fractional_with_spaces(self):
        assert parse_odds(" 5 / 2 ") == Odds.fractional(5, 2)

    def test_surrounding_whitespace(self):
        assert parse_odds("  +150\n") == Odds.american(150)

    def test_classmethod(self):
        assert Odds.parse("+150").format is OddsFormat.AMERICAN

    @pytest.mark.parametrize(
        "raw",
        ["invalid", "", "   ", "150", "+abc", "+", "3/2/1", "/2", "3/", "abc/2", "3/abc",
         "2.5.1", "-2.5", "+1.5", "1e3", "2,50"],
    )
    def test_malformed_is_parse_error(self, raw):
        with pytest.raises(ParseError):
            parse_odds(raw)

    def test_bare_integer_message(self):
        with pytest.raises(ParseError, match="Ambiguous"):
            parse_odds("150")

    def test_non_string(self):
        with pytest.raises(ParseError):
            parse_odds(150)


class TestParseValidation:
    def test_decimal_below_one(self):
        with pytest.raises(InvalidDecimalOdds):
            parse_odds("0.5")

    def test_zero_denominator(self):
        with pytest.raises(ZeroDenominator):
            parse_odds("3/0")

    def test_american_below_100(self):
        with pytest.raises(InvalidAmericanOdds):
            parse_odds("+50")

    def test_american_zero(self):
        with pytest.raises(InvalidAmericanOdds):
            parse_odds("-0")

    def test_american_above_ceiling(self):
        with pytest.raises(ValueOutOfRange):
            parse_odds("+150000")

    @pytest.mark.parametrize(
        "raw",
        ["+" + "1" * 5000, "-" + "9" * 5000, "1" * 5000 + "/1", "3/" + "7" * 5000, "9" * 5000 + ".0"],
    )
    def test_overlong_digit_runs_are_out_of_range(self, raw):
        with pytest.raises(ValueOutOfRange, match="Too many digits"):
            parse_odds(raw)

    def test_leading_zeros_do_not_count(self):
        assert parse_odds("+" + "0" * 40 + "150") == Odds.american(150)


class TestFormat:
    def test_positive_american_has_plus(self):
        assert str(Odds.american(150)) == "+150"

    def test_negative_american(self):
        assert format_odds(Odds.american(-110)) == "-110"

    def test_decimal_two_places(self):
        assert str(Odds.decimal(2.5)) == "2.50"
        assert str(Odds.decimal(1.909090909)) == "1.91"

    def test_fractional(self):
        assert str(Odds.fractional(3, 2)) == "3/2"

    def test_fractional_lowest_terms(self):
        assert str(Odds.fractional(6, 4)) == "3/2"
        assert str(Odds.fractional(0, 4)) == "0/1"

    def test_invalid_value_is_not_rendered(self):
        with pytest.raises(ZeroDenominator):
            str(Odds.fractional(3, 0))
        with pytest.raises(InvalidAmericanOdds):
            format_odds(Odds.american(0))


class TestFormatParseIdempotence:
    @pytest.mark.parametrize(
        "odds",
        [
            Odds.american(150),
            Odds.american(-110),
            Odds.american(-100),
            Odds.decimal(2.5),
            Odds.decimal(1.0),
            Odds.decimal(1.91),
            Odds.fractional(3, 2),
            Odds.fractional(6, 4),
            Odds.fractional(0, 1),
        ],
    )
    def test_reparse_is_equivalent(self, odds):
        reparsed = parse_odds(str(odds))
        assert reparsed.format is odds.format
        assert reparsed.to_decimal() == pytest.approx(odds.to_decimal(), abs=5e-3)
