"""Allow running as ``python -m prdiff``."""

import sys

from prdiff.cli import main

sys.exit(main())
