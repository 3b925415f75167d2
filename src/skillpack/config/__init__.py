"""Configuration loading and normalization for Skillpack."""

from __future__ import annotations

from skillpack.config.loader import load_config
from skillpack.config.model import SkillpackConfig

__all__ = ["SkillpackConfig", "load_config"]
