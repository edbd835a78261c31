#!/usr/bin/env python3
"""
Dotted entry point.
Allows running as: python3 -m dotted <command>
"""

import sys

from dotted.cli import main

if __name__ == "__main__":
    sys.exit(main())
