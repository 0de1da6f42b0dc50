"""HTTP client helper."""

from typing import Any, Dict, Optional

import aiohttp

from ..core.exceptions import FeedError


class HTTPClient:
    """Async JSON-over-HTTP client wrapper with a lazily created session."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, path: str) -> str:
        """Join a relative path onto ``base_url``; absolute URLs pass through."""
        if self.base_url and not path.startswith("http"):
            return f"{self.base_url}/{path.lstrip('/')}"
        return path

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        Raises:
            FeedError: On a non-2xx response, with the HTTP status attached.
        """
        url = self.build_url(path)
        async with self.session.get(url, params=params, headers=headers) as response:
            if response.status >= 400:
                raise FeedError(
                    f"GET {url} failed with HTTP {response.status}",
                    status_code=response.status,
                )
            return await response.json()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
