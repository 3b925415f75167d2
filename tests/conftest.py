"""Shared pytest fixtures for skill folders on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

VALID_SKILL_MD = "---\nname: my-skill\ndescription: Does useful things\n---\n# My Skill\n\nBody text.\n"


@pytest.fixture
def make_skill(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a skill folder with optional extra files."""

    def _make(
        name: str = "my-skill",
        skill_md: str | None = VALID_SKILL_MD,
        files: dict[str, str] | None = None,
        parent: Path | None = None,
    ) -> Path:
        skill_dir = (parent or tmp_path / "skills") / name
        skill_dir.mkdir(parents=True)
        if skill_md is not None:
            (skill_dir / "SKILL.md").write_text(skill_md, encoding="utf-8")
        for relative, content in (files or {}).items():
            target = skill_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture
def valid_skill(make_skill: Callable[..., Path]) -> Path:
    """Return a valid skill folder with a script and a reference file."""
    return make_skill(
        files={
            "scripts/run.py": "print('hello')\n",
            "references/guide.md": "# Guide\n",
        }
    )
