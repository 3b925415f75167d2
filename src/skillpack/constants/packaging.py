"""Archive defaults."""

from __future__ import annotations

import zipfile

DEFAULT_ARCHIVE_SUFFIX: str = ".zip"
DEFAULT_COMPRESSION_LEVEL: int = 9
MIN_COMPRESSION_LEVEL: int = 0
MAX_COMPRESSION_LEVEL: int = 9
ARCHIVE_COMPRESSION: int = zipfile.ZIP_DEFLATED
ARCHIVE_SEPARATOR: str = "/"
