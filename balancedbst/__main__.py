"""Allow ``python -m balancedbst`` to run the demonstration driver."""

import sys

from .demo import main

if __name__ == "__main__":
    sys.exit(main())
