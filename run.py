"""mazeforge CLI launcher.

Run `python run.py --help` for details.
"""

import sys

from mazeforge.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
