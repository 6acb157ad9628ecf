"""Allow ``python -m weather_manager``."""

import sys

from weather_manager.cli import main

sys.exit(main())
