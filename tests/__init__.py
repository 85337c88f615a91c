"""pysbc test suite.

Tests import ``pysbc`` from the ``src/`` checkout so the suite runs without an
editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path


_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.is_dir() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))
