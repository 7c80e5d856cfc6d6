"""Allow ``python -m calorie_tracker``."""

import sys

from calorie_tracker.cli import main

sys.exit(main())
