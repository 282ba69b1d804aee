#!/usr/bin/env python3
"""Entry point: zlelaunch command launcher"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[0]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from zlelaunch.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
