"""Shared exception hierarchy for Skillpack."""

from __future__ import annotations

from .base import SkillpackError
from .config import ConfigError
from .packaging import (
    ArchiveError,
    MissingMetadataError,
    NotASkillDirectoryError,
    PackagingError,
    SkillNotFoundError,
    SkillValidationError,
)

__all__ = [
    "ArchiveError",
    "ConfigError",
    "MissingMetadataError",
    "NotASkillDirectoryError",
    "PackagingError",
    "SkillNotFoundError",
    "SkillValidationError",
    "SkillpackError",
]
