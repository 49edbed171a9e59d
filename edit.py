#!/usr/bin/python3

"""
Entry point script for EditCore.
"""

import sys

from src.editcore.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
