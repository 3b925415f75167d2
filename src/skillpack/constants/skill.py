"""Constants for SKILL.md discovery and front-matter checks."""

from __future__ import annotations

import re

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
FRONTMATTER_DELIMITER: str = "---"

FRONTMATTER_BLOCK_PATTERN: re.Pattern[str] = re.compile(r"^---\n(.*?)\n---", re.DOTALL)
NAME_KEY: str = "name:"
DESCRIPTION_KEY: str = "description:"

HYPHEN_CASE_PATTERN: re.Pattern[str] = re.compile(r"^[a-z0-9-]+$")
HYPHEN: str = "-"
DOUBLE_HYPHEN: str = "--"
FORBIDDEN_DESCRIPTION_CHARS: tuple[str, ...] = ("<", ">")

MSG_NOT_FOUND: str = "SKILL.md not found"
MSG_READ_ERROR: str = "Could not read SKILL.md: {error}"
MSG_NO_FRONTMATTER: str = "No YAML frontmatter found"
MSG_INVALID_FRONTMATTER: str = "Invalid frontmatter format"
MSG_MISSING_NAME: str = "Missing 'name' in frontmatter"
MSG_MISSING_DESCRIPTION: str = "Missing 'description' in frontmatter"
MSG_NAME_CHARSET: str = "Name '{name}' should be hyphen-case (lowercase letters, digits, and hyphens only)"
MSG_NAME_HYPHENS: str = "Name '{name}' cannot start/end with hyphen or contain consecutive hyphens"
MSG_DESCRIPTION_BRACKETS: str = "Description cannot contain angle brackets (< or >)"
MSG_VALID: str = "Skill is valid!"
