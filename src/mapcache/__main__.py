"""Allow ``python -m mapcache``."""

from mapcache.cli.main import main

raise SystemExit(main())
