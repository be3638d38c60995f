"""Allow ``python -m shared_scaffold``."""

import sys

from shared_scaffold.cli import main

if __name__ == "__main__":
    sys.exit(main())
