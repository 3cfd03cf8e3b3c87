"""Standalone CLI for one filtered catalog search.

Usage::

    python -m filmfilter.cli.search --genre drama --genre crime --all-genres
    python -m filmfilter.cli.search --year-min 1990 --rating-min 8 --json
    python -m filmfilter.cli.search --show-query
    python -m filmfilter.cli.search --list-genres

Logs go to stderr so stdout carries only the results.  Exit status is 1
when the catalog request fails.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from filmfilter.config.settings import Settings
from filmfilter.main import FilterPanel, build_panel
from filmfilter.models.countries import STREAMING_COUNTRIES
from filmfilter.models.filters import LIMIT_OPTIONS
from filmfilter.models.outcome import SearchOutcome, SearchStatus
from filmfilter.utils.errors import ConfigurationError, InvalidFilterError
from filmfilter.utils.formatting import format_number, format_range, format_results_table
from filmfilter.utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filmfilter",
        description="Search the movie catalog and show where results are streaming.",
    )
    parser.add_argument("--id", dest="tconst", default="", help="IMDb identifier (tt1234567)")
    parser.add_argument("--title", default="", help="Title contains")
    parser.add_argument(
        "--genre",
        action="append",
        default=[],
        help="Genre to include (repeatable; matched case-insensitively)",
    )
    parser.add_argument(
        "--all-genres",
        action="store_true",
        help="Require every selected genre instead of any",
    )
    parser.add_argument("--year-min", type=int)
    parser.add_argument("--year-max", type=int)
    parser.add_argument("--runtime-min", type=int, help="Minutes")
    parser.add_argument("--runtime-max", type=int, help="Minutes")
    parser.add_argument("--rating-min", type=float)
    parser.add_argument("--rating-max", type=float)
    parser.add_argument("--min-votes", type=int, help="Minimum number of votes")
    parser.add_argument(
        "--limit",
        type=int,
        help=f"Number of results (the panel offers {', '.join(map(str, LIMIT_OPTIONS))})",
    )
    parser.add_argument(
        "--country",
        choices=[c.slug for c in STREAMING_COUNTRIES],
        help="Country for streaming services",
    )
    parser.add_argument("--base-url", help="Catalog backend base URL")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--show-query", action="store_true", help="Print the query and exit")
    parser.add_argument("--list-genres", action="store_true", help="Print genres and exit")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def _resolve_genre(panel: FilterPanel, genre: str) -> str:
    """Match *genre* against the vocabulary, falling back to the raw value."""
    selector = panel.selector
    selector.set_search(genre)
    for option in selector.filtered:
        if option.lower() == genre.strip().lower():
            return option
    return genre.strip()


def apply_arguments(panel: FilterPanel, args: argparse.Namespace) -> None:
    """Copy parsed CLI arguments onto the panel's filters."""
    controller = panel.controller
    if args.country:
        controller.set_country(args.country)
    controller.set_id_filter(args.tconst)
    controller.set_title_contains(args.title)

    selector = panel.selector
    selector.open()
    for genre in args.genre:
        resolved = _resolve_genre(panel, genre)
        if not selector.is_selected(resolved):
            selector.toggle(resolved)
    selector.done()

    controller.set_require_all_categories(args.all_genres)
    controller.set_year_range(args.year_min, args.year_max)
    controller.set_runtime_range(args.runtime_min, args.runtime_max)
    controller.set_rating_range(args.rating_min, args.rating_max)
    if args.min_votes is not None:
        controller.set_min_popularity(args.min_votes)
    if args.limit is not None:
        controller.set_limit(args.limit)


def _describe_filters(panel: FilterPanel) -> str:
    f = panel.controller.filters
    lines = [
        f"Genres:   {panel.selector.label}"
        + (" (all required)" if f.require_all_categories else ""),
        f"Years:    {format_range(f.year_range.min, f.year_range.max)}",
        f"Runtime:  {format_range(f.runtime_range.min, f.runtime_range.max, kind='runtime')}",
        f"Rating:   {format_range(f.rating_range.min, f.rating_range.max, kind='rating')}",
        f"Votes:    >= {format_number(f.min_popularity)}",
        f"Limit:    {f.limit}",
        f"Country:  {panel.controller.country}",
    ]
    return "\n".join(lines)


def render_outcome(outcome: SearchOutcome, as_json: bool) -> str:
    if as_json:
        if outcome.status is SearchStatus.ERROR:
            return json.dumps({"error": outcome.error}, indent=2)
        return json.dumps([m.to_wire() for m in outcome.results], indent=2, ensure_ascii=False)
    if outcome.status is SearchStatus.ERROR:
        return f"Error: {outcome.error}"
    return format_results_table(outcome.results)


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    try:
        panel = build_panel(settings)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    try:
        await panel.load_options()

        if args.list_genres:
            print("\n".join(panel.options.options))
            return 0

        try:
            apply_arguments(panel, args)
        except InvalidFilterError as exc:
            print(f"Invalid filter: {exc}", file=sys.stderr)
            return 2

        if args.show_query:
            print(panel.controller.query_string)
            return 0

        if not args.json:
            print(_describe_filters(panel))
            print()

        outcome = await panel.controller.submit()
        if outcome is None:
            outcome = panel.controller.outcome
        print(render_outcome(outcome, args.json))
        return 1 if outcome.status is SearchStatus.ERROR else 0
    finally:
        await panel.aclose()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings()
    if args.base_url:
        settings = settings.model_copy(update={"api_base_url": args.base_url})

    configure_logging(
        log_level="WARNING" if args.quiet or args.json else settings.log_level,
        json_output=settings.app_env == "production",
        stream=sys.stderr,
    )
    return asyncio.run(_run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
