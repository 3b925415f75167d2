"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from skillpack.model import ValidationResult

type EntryCallback = Callable[[str], None]
type SkillValidator = Callable[[Path], ValidationResult]
