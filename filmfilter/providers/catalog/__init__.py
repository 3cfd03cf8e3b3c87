"""Catalog provider implementations."""

from filmfilter.providers.catalog.http_catalog_provider import (
    HttpCatalogProvider,
    parse_movie_payload,
)

__all__ = ["HttpCatalogProvider", "parse_movie_payload"]
