"""Search orchestration: the SearchController state machine."""

from filmfilter.pipeline.search_controller import SearchController

__all__ = ["SearchController"]
