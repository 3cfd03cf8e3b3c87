"""Custom exception hierarchy for filmfilter.

All application exceptions inherit from :class:`FilmFilterError`, which
carries an optional ``provider_name`` so error handlers can identify which
remote service ("catalog", "streaming") caused the failure.

    FilmFilterError  (base -- catch-all for any filmfilter error)
    +-- CatalogRequestError       (primary movie search / genre fetch)
    +-- StreamingLookupError      (per-title streaming enrichment)
    +-- InvalidFilterError        (a filter value that cannot be clamped)
    +-- ConfigurationError        (startup / missing config)

Only :class:`CatalogRequestError` ever reaches the user: the search
controller turns it into the error outcome.  Streaming failures are
degraded per title and vocabulary failures fall back to the static list.
"""


class FilmFilterError(Exception):
    """Base exception for all filmfilter errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[catalog] HTTP 502``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Remote service errors
# ---------------------------------------------------------------------------

class CatalogRequestError(FilmFilterError):
    """Raised when the catalog search or genre request fails.

    Covers transport errors, timeouts, non-2xx statuses and bodies that are
    not JSON.  ``status_code`` is set when the server answered.
    """

    def __init__(
        self,
        message: str = "Catalog request failed",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        return self._status_code


class StreamingLookupError(FilmFilterError):
    """Raised when a streaming-availability lookup for one title fails."""

    def __init__(
        self,
        message: str = "Streaming lookup failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Local errors
# ---------------------------------------------------------------------------

class InvalidFilterError(FilmFilterError):
    """Raised for filter values that have no sensible clamped equivalent."""

    def __init__(
        self,
        message: str = "Invalid filter value",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(FilmFilterError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
