"""filmfilter -- filter-state and search orchestration for a movie catalog.

The package is organised by concern:

- ``models``     -- filter state, result items, search outcomes, locales
- ``interfaces`` -- abstract contracts for the remote catalog, streaming
  lookup and cache services
- ``providers``  -- httpx / cachetools implementations of those contracts
- ``services``   -- query serialization and the genre vocabulary/selector
- ``pipeline``   -- the search controller state machine
- ``cli``        -- ``python -m filmfilter.cli.search``
"""

__version__ = "0.1.0"
