"""Allow ``python -m fsguard``."""

import sys

from fsguard.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
