"""Quick structural validation of a skill's SKILL.md.

Checks run in a fixed order and stop at the first violation, so a result
always carries exactly one message.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillpack.constants.skill import (
    DESCRIPTION_KEY,
    DOUBLE_HYPHEN,
    FORBIDDEN_DESCRIPTION_CHARS,
    FRONTMATTER_DELIMITER,
    HYPHEN,
    HYPHEN_CASE_PATTERN,
    MSG_DESCRIPTION_BRACKETS,
    MSG_INVALID_FRONTMATTER,
    MSG_MISSING_DESCRIPTION,
    MSG_MISSING_NAME,
    MSG_NAME_CHARSET,
    MSG_NAME_HYPHENS,
    MSG_NO_FRONTMATTER,
    MSG_NOT_FOUND,
    MSG_READ_ERROR,
    MSG_VALID,
    NAME_KEY,
)
from skillpack.model import SkillPackage, ValidationResult
from skillpack.parsers import extract_frontmatter, read_field

logger = logging.getLogger(__name__)


def validate_skill(skill_path: Path | str) -> ValidationResult:
    """Validate the SKILL.md inside ``skill_path`` and return the verdict."""
    skill = SkillPackage.from_path(skill_path)
    skill_md = skill.metadata_path

    try:
        found = skill_md.exists()
    except OSError as exc:
        logger.debug("Failed to stat %s: %s", skill_md, exc)
        return ValidationResult.failure(MSG_READ_ERROR.format(error=exc))
    if not found:
        return ValidationResult.failure(MSG_NOT_FOUND)

    # Line endings are kept as written; a CRLF front-matter block does not match.
    try:
        with skill_md.open(encoding="utf-8", newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %s: %s", skill_md, exc)
        return ValidationResult.failure(MSG_READ_ERROR.format(error=exc))

    if not content.startswith(FRONTMATTER_DELIMITER):
        return ValidationResult.failure(MSG_NO_FRONTMATTER)

    frontmatter = extract_frontmatter(content)
    if frontmatter is None:
        return ValidationResult.failure(MSG_INVALID_FRONTMATTER)

    if NAME_KEY not in frontmatter:
        return ValidationResult.failure(MSG_MISSING_NAME)
    if DESCRIPTION_KEY not in frontmatter:
        return ValidationResult.failure(MSG_MISSING_DESCRIPTION)

    name = read_field(frontmatter, "name")
    if name is not None:
        name_error = check_skill_name(name)
        if name_error:
            return ValidationResult.failure(name_error)

    description = read_field(frontmatter, "description")
    if description is not None and any(char in description for char in FORBIDDEN_DESCRIPTION_CHARS):
        return ValidationResult.failure(MSG_DESCRIPTION_BRACKETS)

    logger.debug("Validated skill %s", skill.name)
    return ValidationResult.success(MSG_VALID)


def check_skill_name(name: str) -> str | None:
    """Return an error message when ``name`` is not hyphen-case, else ``None``.

    The character set is checked before hyphen placement.
    """
    if not HYPHEN_CASE_PATTERN.match(name):
        return MSG_NAME_CHARSET.format(name=name)
    if name.startswith(HYPHEN) or name.endswith(HYPHEN) or DOUBLE_HYPHEN in name:
        return MSG_NAME_HYPHENS.format(name=name)
    return None
