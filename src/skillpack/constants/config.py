"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillpack.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "archive_suffix",
        "compression_level",
        "validate",
    }
)
