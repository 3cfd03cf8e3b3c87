"""Streaming-availability provider implementations."""

from filmfilter.providers.streaming.http_streaming_provider import (
    HttpStreamingProvider,
    parse_services,
)

__all__ = ["HttpStreamingProvider", "parse_services"]
