"""Allow ``python -m mcoded7``."""

import sys

from .cli.main import main

sys.exit(main())
