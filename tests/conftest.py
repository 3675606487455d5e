"""Pytest configuration shared by the portal mock tests."""

from __future__ import annotations

import sys
from pathlib import Path


# ``app`` lives at the repository root; make it importable without an install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
