"""Allow ``python -m skirun_finder MAP_FILE``."""

import sys

from skirun_finder.cli import main

if __name__ == "__main__":
    sys.exit(main())
