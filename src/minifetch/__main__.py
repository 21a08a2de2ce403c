"""Allow running minifetch with ``python -m minifetch``."""

import sys

from minifetch.app import main

sys.exit(main())
