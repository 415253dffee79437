"""Convert odds between formats from the command line.

Usage:
    python scripts/odds_calculator.py +150 2.50 3/2
    echo "-110" | python scripts/odds_calculator.py
"""

from __future__ import annotations

import argparse
import logging
import sys

from oddsconv.config.settings import settings
from oddsconv.ingestion.normalize import NormalizedPrice, normalize_quotes

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger("odds_calculator")


def format_price(price: NormalizedPrice) -> str:
    american = f"{price.american:+d}" if price.american is not None else "n/a"
    return (
        f"{price.source:<10s}  ({price.format.value})\n"
        f"  American:    {american}\n"
        f"  Decimal:     {price.decimal:.2f}\n"
        f"  Fractional:  {price.fractional}\n"
        f"  Implied:     {price.implied_prob * 100:.2f}%"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "odds",
        nargs="*",
        help="odds such as +150, -110, 2.50 or 3/2 (read from stdin when omitted)",
    )
    args = parser.parse_args(argv)

    quotes = args.odds or [line for line in sys.stdin.read().splitlines() if line.strip()]
    if not quotes:
        parser.error("no odds given")

    result = normalize_quotes(quotes)
    for price in result.prices:
        print(format_price(price))
    for reject in result.rejected:
        print(f"{reject.source!r}: {reject.error}", file=sys.stderr)

    logger.info("Converted %d, rejected %d", len(result.prices), len(result.rejected))

    return 1 if result.rejected else 0


if __name__ == "__main__":
    sys.exit(main())
