"""Human-readable rendering of filter values and result rows.

Used by the CLI.  Missing values render as an em dash, matching the
catalog page the backend was built for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from filmfilter.models.movie import Movie

MISSING = "—"
RANGE_SEPARATOR = "–"

_COLUMNS = ("Title", "Year", "Rating", "Length", "Genres", "Streaming Services")


def minutes_to_hhmm(minutes: float) -> str:
    """Render a runtime in minutes as ``HH:MM:00`` (e.g. 135 -> ``02:15:00``)."""
    whole = int(minutes)
    hours, mins = divmod(whole, 60)
    return f"{hours:02d}:{mins:02d}:00"


def format_number(value: float) -> str:
    """Group thousands with commas: ``100000`` -> ``100,000``."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def format_range(low: float, high: float, kind: str = "plain") -> str:
    """Render a ``low–high`` pair for a range label.

    *kind* is ``"runtime"`` (HH:MM:00), ``"rating"`` (one decimal) or
    ``"plain"``.
    """
    if kind == "runtime":
        return f"{minutes_to_hhmm(low)}{RANGE_SEPARATOR}{minutes_to_hhmm(high)}"
    if kind == "rating":
        return f"{low:.1f}{RANGE_SEPARATOR}{high:.1f}"
    return f"{low}{RANGE_SEPARATOR}{high}"


def movie_row(movie: Movie) -> tuple[str, ...]:
    """Return the display cells for one result row."""
    providers = MISSING if movie.providers is None else ", ".join(movie.providers)
    return (
        movie.title,
        MISSING if movie.year is None else str(movie.year),
        MISSING if movie.rating is None else str(movie.rating),
        MISSING if movie.runtime_minutes is None else minutes_to_hhmm(movie.runtime_minutes),
        movie.genres or MISSING,
        providers,
    )


def format_results_table(movies: Sequence[Movie]) -> str:
    """Render results as a fixed-width text table, or ``No results``."""
    if not movies:
        return "No results"

    rows = [_COLUMNS, *(movie_row(m) for m in movies)]
    widths = [max(len(row[i]) for row in rows) for i in range(len(_COLUMNS))]

    def _line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [_line(rows[0]), _line(["-" * w for w in widths])]
    lines.extend(_line(row) for row in rows[1:])
    return "\n".join(lines)
