"""Allow ``python -m campus_locations``."""

import sys

from campus_locations.cli import main

sys.exit(main())
