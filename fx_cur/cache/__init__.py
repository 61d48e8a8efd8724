"""Helpers for locating the on-disk rate cache."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Final

__all__ = ["CACHE_FILE_NAME", "DEFAULT_CACHE_PATH"]

CACHE_FILE_NAME: Final[str] = "fx-cur-data.xml"

# One well-known file in the platform temp directory; every invocation reads
# and replaces the same document.
DEFAULT_CACHE_PATH: Final[Path] = Path(tempfile.gettempdir()) / CACHE_FILE_NAME
