#!/usr/bin/env python3
"""Command line wire gauge voltage drop calculator."""
from __future__ import annotations

import sys
from pathlib import Path

# Allow imports when run from repo root
sys.path.append(str(Path(__file__).resolve().parent / "WireTools"))

from wire_drop.cli import main

if __name__ == "__main__":
    sys.exit(main())
