import logging
from typing import Optional

import httpx

from ..errors import FetchFailureError
from ..settings import settings

logger = logging.getLogger("hearth.fetch")

ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


async def _read_limited(response: httpx.Response, max_bytes: int) -> bytes:
    # Pages past the cap are truncated, not rejected; the recipe markup is
    # almost always near the top.
    chunks = []
    total = 0
    async for chunk in response.aiter_bytes():
        remaining = max_bytes - total
        if remaining <= 0:
            break
        chunks.append(chunk[:remaining])
        total += len(chunks[-1])
    return b"".join(chunks)


async def fetch_html(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """
    GET a page and return its decoded body.

    Redirects are not followed, so a 3xx counts as a failure like any other
    non-200 status.

    Raises:
        FetchFailureError: On transport errors or a non-200 response
    """
    headers = {
        "User-Agent": settings.fetch_user_agent,
        "Accept": ACCEPT_HTML,
    }
    timeout = httpx.Timeout(settings.fetch_timeout_sec)

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=False, transport=transport) as client:
            async with client.stream("GET", url, headers=headers) as response:
                if response.status_code != 200:
                    logger.warning(f"Fetch of {url} returned HTTP {response.status_code}")
                    raise FetchFailureError(f"Failed to fetch URL: HTTP {response.status_code}")

                body = await _read_limited(response, settings.fetch_max_bytes)
                encoding = response.encoding or "utf-8"
    except httpx.HTTPError as e:
        logger.warning(f"Fetch of {url} failed: {e}")
        raise FetchFailureError(f"Failed to fetch URL: {e}")

    return body.decode(encoding, errors="replace")
