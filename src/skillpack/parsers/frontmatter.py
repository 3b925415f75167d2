"""Line-oriented front-matter extraction for SKILL.md files.

A front-matter block is the first ``---``/``---`` pair at the start of the
document, and fields are read as ``key: value`` lines without interpreting
the block as YAML.
"""

from __future__ import annotations

import re

from skillpack.constants.skill import FRONTMATTER_BLOCK_PATTERN


def extract_frontmatter(content: str) -> str | None:
    """Return the body of the leading front-matter block, or ``None``."""
    match = FRONTMATTER_BLOCK_PATTERN.match(content)
    if not match:
        return None
    return match.group(1)


def read_field(frontmatter: str, key: str) -> str | None:
    """Return the stripped value of the first ``key:`` line, or ``None``."""
    match = re.search(rf"{re.escape(key)}:\s*(.+)", frontmatter)
    if not match:
        return None
    return match.group(1).strip()
