#!/usr/bin/env python3
"""
pagecap
Browser screenshots and interactions, each run in a disposable container
"""

import sys

from pagecap.cli import run

if __name__ == "__main__":
    sys.exit(run())
