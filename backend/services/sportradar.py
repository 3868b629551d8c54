"""Sportradar soccer API client: URL building plus cached JSON fetches.

Every upstream call goes through ``SportradarClient.fetch_json``, which serves
a URL from the TTL cache while its entry is fresh and otherwise performs one
GET. Failures are never cached, and concurrent misses for the same URL each
hit the network.
"""

import logging
from urllib.parse import quote, urlparse

import httpx

from config import Settings
from errors import NetworkError, ParseError, UpstreamError
from services.cache import MISSING, TTLCache

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides alphanumerics and -_.~
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def _safe_url(url: str) -> str:
    """Strip query params (they contain the API key) for safe logging."""
    parsed = urlparse(str(url))
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"


class SportradarClient:
    def __init__(
        self,
        settings: Settings,
        cache: TTLCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = settings.sr_api_key
        self._root = f"{settings.sr_base_url}{settings.sr_soccer_base}"
        self._timeout = settings.upstream_timeout
        self._transport = transport
        self.cache = cache if cache is not None else TTLCache(ttl_seconds=settings.cache_ttl_seconds)

    def _url(self, path: str) -> str:
        return f"{self._root}{path}?api_key={self._api_key}"

    def schedules_url(self, date: str) -> str:
        return self._url(f"/schedules/{encode_component(date)}/schedules.json")

    def probabilities_url(self, match_id: str) -> str:
        return self._url(f"/matches/{encode_component(match_id)}/probabilities.json")

    def summary_url(self, match_id: str) -> str:
        return self._url(f"/matches/{encode_component(match_id)}/summary.json")

    async def fetch_json(self, url: str):
        """Return parsed JSON for ``url``, from cache when younger than the TTL."""
        # Entries are stamped with the lookup time, not the time the response arrived.
        now = self.cache.now()
        cached = self.cache.get(url, MISSING, now=now)
        if cached is not MISSING:
            logger.debug("Cache hit: %s", _safe_url(url))
            return cached

        logger.info("Fetching %s", _safe_url(url))
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                resp = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Upstream request failed for %s: %s", _safe_url(url), e)
            raise NetworkError(f"Upstream request failed: {e}") from e

        if not resp.is_success:
            logger.warning("Upstream returned %d for %s", resp.status_code, _safe_url(url))
            raise UpstreamError(resp.status_code, resp.reason_phrase, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON from upstream: {e}") from e

        self.cache.set(url, data, timestamp=now)
        return data
