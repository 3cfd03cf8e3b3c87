"""structlog configuration for filmfilter.

One processor chain, two renderers: a ConsoleRenderer while developing
and a JSONRenderer when ``APP_ENV=production`` (or ``json_output=True``).
The stdlib root logger is pointed at the same chain, so records emitted
by httpx look like ours.

The CLI sends everything to stderr; stdout is reserved for results.
"""

import logging
import os
import sys
from typing import IO

import structlog

# httpx logs one INFO line per request; a search with N results makes N+1.
_NOISY_LOGGERS = ("httpx", "httpcore")


def _processor_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(use_json: bool, stream: IO[str]) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(stream, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream: IO[str] | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib bridge.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR.
        json_output: Force JSON lines regardless of ``APP_ENV``.
        stream: Destination for log lines; stdout when omitted.

    Returns:
        The root structlog logger.
    """
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"
    stream = stream or sys.stdout
    level = log_level.upper()

    chain = _processor_chain()
    renderer = _renderer(use_json, stream)

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *chain,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    if level != "DEBUG":
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a logger bound to *name*, configuring defaults on first use."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(logger_name=name)
