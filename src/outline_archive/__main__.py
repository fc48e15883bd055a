"""Allow ``python -m outline_archive``."""

import sys

from outline_archive.cli import main

sys.exit(main())
