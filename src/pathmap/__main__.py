"""Allow ``python -m pathmap``."""

import sys

from pathmap.ui.cli.cli import main

sys.exit(main())
