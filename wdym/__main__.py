"""Allow ``python -m wdym``."""

import sys

from wdym.cli.main import main

sys.exit(main())
