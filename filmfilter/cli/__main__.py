"""Allow ``python -m filmfilter.cli`` as a shortcut for the search command."""

import sys

from filmfilter.cli.search import main

sys.exit(main())
