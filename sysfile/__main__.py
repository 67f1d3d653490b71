#!/usr/bin/env python3
"""
sysfile command-line utility
----------------------------
Run `python -m sysfile --help` for the available commands.
"""

import sys

from sysfile.cli import main


if __name__ == "__main__":
    sys.exit(main())
