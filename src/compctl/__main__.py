# This project was developed with assistance from AI tools.
"""Allow ``python -m compctl``."""

import sys

from .cli import main

sys.exit(main())
