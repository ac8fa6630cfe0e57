"""Allow ``python -m kubereport``."""

import sys

from kubereport.cli import main

if __name__ == "__main__":
    sys.exit(main())
