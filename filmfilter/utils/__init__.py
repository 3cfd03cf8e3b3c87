"""Utility modules for filmfilter.

- **errors** -- domain exception hierarchy rooted at FilmFilterError.
- **concurrency** -- semaphore-throttled gather and the ``settle_all``
  barrier used for streaming enrichment.
- **logging** -- structlog setup with console/JSON dual rendering.
- **formatting** -- runtime, number and results-table rendering for the CLI.
"""

from filmfilter.utils.concurrency import Settled, settle_all, throttled_gather
from filmfilter.utils.errors import (
    CatalogRequestError,
    ConfigurationError,
    FilmFilterError,
    InvalidFilterError,
    StreamingLookupError,
)
from filmfilter.utils.formatting import (
    format_number,
    format_range,
    format_results_table,
    minutes_to_hhmm,
)
from filmfilter.utils.logging import configure_logging, get_logger

__all__ = [
    "CatalogRequestError",
    "ConfigurationError",
    "FilmFilterError",
    "InvalidFilterError",
    "Settled",
    "StreamingLookupError",
    "configure_logging",
    "format_number",
    "format_range",
    "format_results_table",
    "get_logger",
    "minutes_to_hhmm",
    "settle_all",
    "throttled_gather",
]
