"""Allow ``python -m skillpack``."""

from skillpack.cli.main import main

raise SystemExit(main())
