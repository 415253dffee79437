"""Odds notation tags."""

from __future__ import annotations

from enum import Enum


class OddsFormat(str, Enum):
    AMERICAN = "american"      # moneyline, e.g. +150 / -110
    DECIMAL = "decimal"        # total return per unit staked, e.g. 2.50
    FRACTIONAL = "fractional"  # profit / stake, e.g. 3/2
