"""Allow ``python -m spritify``."""

import sys

from spritify.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
