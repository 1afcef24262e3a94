"""Allow running as python -m dond_game."""

import sys

from .cli import main

sys.exit(main())
