"""Launch Square Game.  See ``main.py`` for the available options."""

import sys

from main import main

if __name__ == "__main__":
    sys.exit(main())
