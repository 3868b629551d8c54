"""Reshape Sportradar payloads into the proxy's response schema."""


def competitor_name(competitors: list[dict] | None, qualifier: str) -> str:
    """Name of the competitor tagged ``qualifier`` ("home"/"away"), or ""."""
    for competitor in competitors or []:
        if competitor.get("qualifier") == qualifier:
            return competitor.get("name") or ""
    return ""


def to_match_summary(event: dict) -> dict:
    competitors = event.get("competitors")
    return {
        "match_id": event.get("id"),
        "scheduled": event.get("start_time"),
        "league": (event.get("tournament") or {}).get("name"),
        "home": competitor_name(competitors, "home"),
        "away": competitor_name(competitors, "away"),
    }


def summarize_schedule(data: dict) -> list[dict]:
    """One match summary per scheduled event, in upstream order."""
    return [to_match_summary(event) for event in (data or {}).get("sport_events") or []]


def filter_matches(matches: list[dict], home: str | None = None, away: str | None = None) -> list[dict]:
    """Case-insensitive substring filters on team names; home first, then away."""
    if home:
        needle = home.lower()
        matches = [m for m in matches if needle in m["home"].lower()]
    if away:
        needle = away.lower()
        matches = [m for m in matches if needle in m["away"].lower()]
    return matches


def extract_markets(probabilities: dict) -> list[dict]:
    markets = ((probabilities or {}).get("probabilities") or {}).get("markets") or []
    return [
        {
            "key": market.get("name"),
            "outcomes": [
                {"label": outcome.get("name"), "probability": outcome.get("probability")}
                for outcome in market.get("outcomes") or []
            ],
        }
        for market in markets
    ]


def to_odds_result(match_id: str, probabilities: dict, summary: dict) -> dict:
    sport_event = (summary or {}).get("sport_event") or {}
    competitors = sport_event.get("competitors")
    return {
        "match_id": match_id,
        "scheduled": sport_event.get("start_time"),
        "home": competitor_name(competitors, "home"),
        "away": competitor_name(competitors, "away"),
        "markets": extract_markets(probabilities),
    }
