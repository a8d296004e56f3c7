"""Allow ``python -m ftmi``."""

import sys

from ftmi.cli import main

sys.exit(main())
