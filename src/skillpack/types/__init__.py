"""Shared type aliases for Skillpack."""

from .common import EntryCallback, SkillValidator

__all__ = ["EntryCallback", "SkillValidator"]
