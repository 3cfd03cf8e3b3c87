"""Incremental-search multi-select over the genre vocabulary.

The selector keeps three pieces of state: whether the panel is open, the
search text, and the chosen genres.  The visible option list is derived
from the search text and the current vocabulary on every access.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Iterable, Sequence, Union

import structlog

from filmfilter.services.category_options import CategoryOptionsProvider
from filmfilter.utils.logging import get_logger

SelectionListener = Callable[[tuple[str, ...]], None]

PLACEHOLDER = "Select genres"


class CategorySelector:
    """Open/closed multi-select with a case-insensitive substring filter.

    Parameters
    ----------
    options:
        A :class:`CategoryOptionsProvider` (its current options are read on
        each access) or a fixed sequence of options.
    selected:
        Initial selection.
    """

    def __init__(
        self,
        options: Union[CategoryOptionsProvider, Sequence[str]],
        selected: Iterable[str] = (),
    ) -> None:
        self._source = options
        self._selected: tuple[str, ...] = tuple(dict.fromkeys(selected))
        self._is_open = False
        self._search = ""
        self._listeners: list[SelectionListener] = []
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def vocabulary(self) -> tuple[str, ...]:
        if isinstance(self._source, CategoryOptionsProvider):
            return self._source.options
        return tuple(self._source)

    @property
    def filtered(self) -> list[str]:
        query = self._search.strip().lower()
        return [option for option in self.vocabulary if query in option.lower()]

    @property
    def selected(self) -> tuple[str, ...]:
        return self._selected

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def search(self) -> str:
        return self._search

    @property
    def label(self) -> str:
        return ", ".join(self._selected) if self._selected else PLACEHOLDER

    def is_selected(self, category: str) -> bool:
        return category in self._selected

    # ------------------------------------------------------------------
    # Panel
    # ------------------------------------------------------------------

    def open(self) -> None:
        self._is_open = True

    def close(self) -> None:
        self._is_open = False

    def toggle_open(self) -> None:
        self._is_open = not self._is_open

    def set_search(self, text: str) -> None:
        self._search = text

    def done(self) -> None:
        """Close the panel; the selection is kept."""
        self._is_open = False

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle(self, category: str) -> None:
        """Add *category* if absent, remove it if present."""
        if category in self._selected:
            self._set_selected(tuple(c for c in self._selected if c != category))
        else:
            self._set_selected((*self._selected, category))

    def clear(self) -> None:
        """Empty the selection; the panel stays as it is."""
        self._set_selected(())

    def replace(self, categories: Iterable[str]) -> None:
        """Overwrite the selection, e.g. after the filters were reset."""
        self._set_selected(tuple(dict.fromkeys(categories)))

    def register_listener(self, callback: SelectionListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unregister_listener(self, callback: SelectionListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _set_selected(self, selected: tuple[str, ...]) -> None:
        if selected == self._selected:
            return
        self._selected = selected
        for callback in list(self._listeners):
            try:
                callback(selected)
            except Exception as exc:
                self._logger.warning(
                    "selection_listener_error",
                    error=str(exc),
                    callback=getattr(callback, "__name__", repr(callback)),
                )
