"""Config data model for packaging runs."""

from __future__ import annotations

from dataclasses import dataclass

from skillpack.constants.packaging import DEFAULT_ARCHIVE_SUFFIX, DEFAULT_COMPRESSION_LEVEL


@dataclass(frozen=True)
class SkillpackConfig:
    """Resolved packaging config."""

    compression_level: int = DEFAULT_COMPRESSION_LEVEL
    archive_suffix: str = DEFAULT_ARCHIVE_SUFFIX
    validate: bool = True
