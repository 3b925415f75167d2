"""Skill archiving."""

from .archive import write_skill_archive
from .packager import package_skill, resolve_output_dir

__all__ = ["package_skill", "resolve_output_dir", "write_skill_archive"]
