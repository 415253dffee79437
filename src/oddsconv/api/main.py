import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from oddsconv.ingestion.normalize import normalize_odds
from oddsconv.pricing.errors import OddsError
from oddsconv.pricing.market import MarketOutcome, favourite, overround
from oddsconv.pricing.odds import Odds

logger = logging.getLogger(__name__)

app = FastAPI(title="Odds Converter", version="0.1.0")


@app.exception_handler(OddsError)
async def odds_error_handler(request: Request, exc: OddsError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"error": exc.kind, "message": exc.message},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/odds/convert")
def odds_convert(
    odds: str = Query(..., description="Odds text, e.g. +150, 2.50 or 3/2 (send + as %2B)"),
):
    """Parse one price and return it in every format."""
    price = normalize_odds(Odds.parse(odds), source=odds.strip())
    return {
        "source": price.source,
        "format": price.format.value,
        "american": f"{price.american:+d}" if price.american is not None else None,
        "decimal": price.decimal,
        "fractional": price.fractional,
        "implied_prob": price.implied_prob,
    }


@app.get("/odds/market")
def odds_market(
    odds: list[str] = Query(..., description="One price per outcome, in any format"),
):
    """Implied probabilities and book margin for one market."""
    outcomes = [MarketOutcome(name=str(i), odds=Odds.parse(raw)) for i, raw in enumerate(odds)]
    fav = favourite(outcomes)
    probs = [o.odds.implied_probability() for o in outcomes]

    return {
        "count": len(outcomes),
        "outcomes": [
            {
                "odds": str(o.odds),
                "implied_prob": round(p, 6),
            }
            for o, p in zip(outcomes, probs)
        ],
        "total_implied_prob": round(sum(probs), 6),
        "overround": round(overround(outcomes), 6),
        "favourite_index": int(fav.name) if fav is not None else None,
    }
