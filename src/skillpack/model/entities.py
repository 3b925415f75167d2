"""Frozen dataclasses shared by validation and packaging."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from skillpack.constants.skill import SKILL_MARKDOWN_FILENAME


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for a single skill: pass/fail plus one human-readable message."""

    ok: bool
    message: str

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str) -> ValidationResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        return cls(ok=False, message=message)


@dataclass(frozen=True)
class SkillPackage:
    """A skill folder on disk, identified by its directory name."""

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path | str) -> SkillPackage:
        absolute = Path(os.path.abspath(path))
        return cls(path=absolute, name=absolute.name)

    @property
    def metadata_path(self) -> Path:
        return self.path / SKILL_MARKDOWN_FILENAME
