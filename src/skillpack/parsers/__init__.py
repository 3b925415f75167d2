"""Parsers for skill metadata documents."""

from .frontmatter import extract_frontmatter, read_field

__all__ = ["extract_frontmatter", "read_field"]
