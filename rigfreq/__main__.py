"""Allow ``python -m rigfreq``."""
import sys

from rigfreq.cli import main

if __name__ == "__main__":
    sys.exit(main())
