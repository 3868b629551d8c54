"""Odds route — win probabilities merged with the match summary."""

import asyncio
import logging

from fastapi import APIRouter, Depends

from errors import ProxyError, ShapingError
from routes.deps import get_sportradar
from services.shaping import to_odds_result
from services.sportradar import SportradarClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/odds/match/{match_id:path}")
async def match_odds(
    match_id: str,
    sportradar: SportradarClient = Depends(get_sportradar),
) -> dict:
    """Probability markets for one match, with teams and kick-off time."""
    try:
        # Both must succeed; the first failure fails the request.
        probabilities, summary = await asyncio.gather(
            sportradar.fetch_json(sportradar.probabilities_url(match_id)),
            sportradar.fetch_json(sportradar.summary_url(match_id)),
        )
        return to_odds_result(match_id, probabilities, summary)
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("Odds lookup failed for %s", match_id)
        raise ShapingError(str(e)) from e
