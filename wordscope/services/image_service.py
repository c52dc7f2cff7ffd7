import logging

import httpx

from wordscope.config import settings

logger = logging.getLogger(__name__)

# Replaced in tests with an httpx.MockTransport
_transport: httpx.AsyncBaseTransport | None = None


async def fetch_image_url(word: str) -> str | None:
    """Return the URL of the top Unsplash photo for ``word``, if any.

    Image lookup is best-effort: every failure is logged and reported
    as ``None`` so the dictionary entry can still be shown.
    """
    if not settings.unsplash_access_key:
        logger.warning("Unsplash access key not configured, skipping image lookup")
        return None

    params = {
        "query": word,
        "per_page": 1,
        "orientation": "landscape",
        "client_id": settings.unsplash_access_key,
    }
    try:
        async with httpx.AsyncClient(
            timeout=settings.image_timeout_seconds, transport=_transport
        ) as client:
            resp = await client.get(settings.unsplash_search_url, params=params)
        if resp.status_code != 200:
            logger.warning("Unsplash search for %r returned %s", word, resp.status_code)
            return None
        data = resp.json()
    except (httpx.HTTPError, ValueError):
        logger.warning("Unsplash search for %r failed", word, exc_info=True)
        return None

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        return None
    try:
        return results[0]["urls"]["regular"]
    except (KeyError, TypeError, IndexError):
        logger.warning("Unexpected Unsplash payload for %r", word)
        return None
