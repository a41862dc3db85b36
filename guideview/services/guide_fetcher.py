"""
Guide fetching over HTTP.

This is the only I/O in guideview. A guide named ``textguide`` lives at
``{origin}/guides/textguide.mdx``; the body is returned exactly as received.
Failures of any kind collapse into `FetchError` and are never retried.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from ..config.constants import GUIDE_PATH_TEMPLATE
from ..config.settings import get_fetch_timeout, get_origin
from ..exceptions import FetchError

logger = logging.getLogger(__name__)


def guide_url(origin: str, identifier: str) -> str:
    """Build the URL of a guide.

    Args:
        origin: Scheme and host, with or without a trailing slash
        identifier: Guide name; quoted as a single path segment

    Raises:
        ValueError: If the identifier is empty
    """
    if not identifier or not identifier.strip():
        raise ValueError("Guide identifier must be a non-empty string")
    path = GUIDE_PATH_TEMPLATE.format(identifier=quote(identifier, safe=""))
    return origin.rstrip("/") + path


class GuideFetcher:
    """Fetches raw guide text.

    The fetcher either borrows an ``httpx.AsyncClient`` (and leaves closing
    it to the owner) or creates its own on first use and closes it in
    `aclose`.
    """

    def __init__(
        self,
        origin: Optional[str] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.origin = (origin or get_origin()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_fetch_timeout()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> GuideFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, identifier: str) -> str:
        """Fetch the source text of a guide.

        Args:
            identifier: Guide name

        Returns:
            The response body, untouched

        Raises:
            FetchError: On a non-success status or any transport failure
            ValueError: If the identifier is empty
        """
        url = guide_url(self.origin, identifier)
        logger.debug("Fetching guide %r from %s", identifier, url)

        try:
            response = await self._get_client().get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(
                f"Could not reach {url}: {e.__class__.__name__}: {e}",
                identifier=identifier,
            ) from e

        if not response.is_success:
            raise FetchError(
                f"Failed to fetch guide: HTTP {response.status_code}",
                identifier=identifier,
                status_code=response.status_code,
            )

        logger.debug("Fetched guide %r (%d bytes)", identifier, len(response.content))
        return response.text
