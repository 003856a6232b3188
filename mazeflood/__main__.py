"""Allow ``python -m mazeflood``."""

import sys

from .cli import main

sys.exit(main())
