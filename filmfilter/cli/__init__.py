"""Command-line tools for filmfilter.

- ``python -m filmfilter.cli.search`` -- run one filtered catalog search
  and print the enriched results as a table or JSON.

The CLI uses argparse and builds its own panel via
:func:`filmfilter.main.build_panel`.
"""
