"""HTTP client wrapper around httpx."""
from __future__ import annotations

from typing import Any

import httpx

from model_catalog.errors import (
    FetchError,
    NetworkError,
    RequestTimeoutError,
    UpstreamStatusError,
)


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into model_catalog exceptions."""

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.Client(
            headers=headers or {},
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    def get_json(self, url: str) -> Any:
        """Send a GET request and return the decoded JSON body.

        Raises a model_catalog error on non-2xx status, transport failure or
        an undecodable body.
        """
        try:
            resp = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        if resp.status_code >= 300:
            raise UpstreamStatusError(
                f"Failed to fetch {url}: {resp.status_code}",
                status_code=resp.status_code,
                url=url,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError(f"Invalid JSON from {url}: {exc}", cause=exc) from exc

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
