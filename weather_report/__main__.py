"""Allow ``python -m weather_report``."""

import sys

from .cli import main

sys.exit(main())
