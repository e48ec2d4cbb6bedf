"""Make the checked-out ``verco`` package importable without installing it."""

from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = str(Path(__file__).resolve().parents[1])

if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)
