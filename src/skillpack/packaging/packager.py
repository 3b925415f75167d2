"""Skill packaging orchestration.

Resolves the skill folder, runs the validator when one is supplied, then
hands the folder to the zip writer. Any failure aborts the run with a
``PackagingError``; no step is retried.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from skillpack.config import SkillpackConfig
from skillpack.exceptions import (
    MissingMetadataError,
    NotASkillDirectoryError,
    PackagingError,
    SkillNotFoundError,
    SkillValidationError,
)
from skillpack.model import SkillPackage
from skillpack.packaging.archive import write_skill_archive
from skillpack.types import EntryCallback, SkillValidator
from skillpack.validation import validate_skill

logger = logging.getLogger(__name__)


def package_skill(
    skill_path: Path | str,
    output_dir: Path | str | None = None,
    *,
    validator: SkillValidator | None = validate_skill,
    config: SkillpackConfig | None = None,
    on_entry: EntryCallback | None = None,
) -> Path:
    """Package a skill folder into ``<output_dir>/<skill-name><suffix>``.

    Passing ``validator=None`` packages without validation. ``on_entry`` is
    called with every archive entry name as it is written.

    Returns:
        The path of the written archive.

    Raises:
        SkillNotFoundError: ``skill_path`` does not exist.
        NotASkillDirectoryError: ``skill_path`` is not a directory.
        MissingMetadataError: the folder has no SKILL.md.
        SkillValidationError: the validator rejected the skill.
        ArchiveError: the archive could not be written.
    """
    config = config or SkillpackConfig()
    skill = SkillPackage.from_path(skill_path)

    _check_skill_folder(skill)

    if validator is None:
        logger.warning("Validator unavailable; packaging %s without validation", skill.name)
    else:
        try:
            result = validator(skill.path)
        except Exception as exc:
            raise PackagingError(f"Error running validation: {exc}") from exc
        if not result.ok:
            raise SkillValidationError(result)
        logger.info("Validated %s: %s", skill.name, result.message)

    destination = resolve_output_dir(output_dir) / f"{skill.name}{config.archive_suffix}"
    entries = write_skill_archive(
        skill.path,
        destination,
        archive_root=skill.name,
        compression_level=config.compression_level,
        on_entry=on_entry,
    )
    logger.info("Packaged %s (%d entries) to %s", skill.name, entries, destination)
    return destination


def resolve_output_dir(output_dir: Path | str | None) -> Path:
    """Return the absolute output directory, creating it when missing.

    Defaults to the current working directory.
    """
    if output_dir is None:
        return Path.cwd()
    path = Path(os.path.abspath(output_dir))
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PackagingError(f"Could not create output directory {path}: {exc}") from exc
    return path


def _check_skill_folder(skill: SkillPackage) -> None:
    """Raise unless ``skill.path`` is a directory holding a SKILL.md."""
    try:
        exists = skill.path.exists()
        is_dir = exists and skill.path.is_dir()
        has_metadata = is_dir and skill.metadata_path.exists()
    except OSError as exc:
        raise PackagingError(f"Could not access skill folder {skill.path}: {exc}") from exc

    if not exists:
        raise SkillNotFoundError(f"Skill folder not found: {skill.path}")
    if not is_dir:
        raise NotASkillDirectoryError(f"Path is not a directory: {skill.path}")
    if not has_metadata:
        raise MissingMetadataError(f"SKILL.md not found in {skill.path}")
