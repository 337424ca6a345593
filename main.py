"""Command-line Entry Point - Root Module.

Lets `python main.py` render the map from a source checkout.
It imports from the quake_map package.
"""

import sys

from quake_map.main import main

__all__ = [
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
