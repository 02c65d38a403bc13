"""Error hierarchy for the catalog tools."""
from __future__ import annotations


class CatalogError(Exception):
    """Base error for all model_catalog errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(CatalogError):
    """The upstream catalog could not be fetched or decoded."""


class UpstreamStatusError(FetchError):
    """The upstream endpoint answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        url: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.url = url


class NetworkError(FetchError):
    """A network-level error occurred."""


class RequestTimeoutError(FetchError):
    """A request timed out."""
