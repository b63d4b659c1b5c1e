#!/usr/bin/env python3
"""
Creation Time Renamer - Main Entry

Prefixes every file in a directory with its creation time after a
single confirmation.

Usage:
    python main.py <directory>
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))

from crtime_cli import main


if __name__ == "__main__":
    sys.exit(main())
