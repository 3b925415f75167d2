"""Packaging-related exceptions.

Every failure that aborts ``package_skill`` derives from ``PackagingError``
so callers can treat input, validation and archive failures alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillpack.exceptions.base import SkillpackError

if TYPE_CHECKING:
    from skillpack.model import ValidationResult


class PackagingError(SkillpackError):
    """Raised when a skill folder cannot be packaged."""


class SkillNotFoundError(PackagingError, FileNotFoundError):
    """Raised when the skill folder does not exist."""


class NotASkillDirectoryError(PackagingError, NotADirectoryError):
    """Raised when the skill path exists but is not a directory."""


class MissingMetadataError(PackagingError, FileNotFoundError):
    """Raised when the skill folder has no SKILL.md."""


class SkillValidationError(PackagingError):
    """Raised when the validator rejects the skill."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(f"Validation failed: {result.message}")
        self.result = result


class ArchiveError(PackagingError, OSError):
    """Raised when the archive cannot be written."""
