"""Filter services: query serialization and the genre vocabulary/selector."""

from filmfilter.services.category_options import GENRE_FALLBACK, CategoryOptionsProvider
from filmfilter.services.category_selector import CategorySelector
from filmfilter.services.query_serializer import build_query_params, build_query_string

__all__ = [
    "GENRE_FALLBACK",
    "CategoryOptionsProvider",
    "CategorySelector",
    "build_query_params",
    "build_query_string",
]
