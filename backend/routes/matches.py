"""Match search route — schedule lookup by date with team filters."""

import logging

from fastapi import APIRouter, Depends, Query

from errors import ProxyError, ShapingError, ValidationError
from routes.deps import get_sportradar
from services.shaping import filter_matches, summarize_schedule
from services.sportradar import SportradarClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/search/matches")
async def search_matches(
    date: str | None = Query(None),
    home: str | None = Query(None),
    away: str | None = Query(None),
    sportradar: SportradarClient = Depends(get_sportradar),
) -> dict:
    """Matches scheduled on ``date``, optionally filtered by team name."""
    if not date:
        raise ValidationError("Missing ?date=YYYY-MM-DD")

    try:
        data = await sportradar.fetch_json(sportradar.schedules_url(date))
        matches = filter_matches(summarize_schedule(data), home=home, away=away)
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("Match search failed for %s", date)
        raise ShapingError(str(e)) from e

    return {"date": date, "count": len(matches), "matches": matches}
