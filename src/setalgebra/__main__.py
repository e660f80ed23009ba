"""Entry point for ``python -m setalgebra``."""

import sys

from .cli import main

sys.exit(main())
