"""Pytest bootstrap so ``import trifm`` finds this checkout.

The ``pytest`` console script may start with a sys.path that lacks the
repository root, for example when the package is not installed.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = str(Path(__file__).resolve().parents[1])

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
