"""Core data models for Skillpack."""

from .entities import SkillPackage, ValidationResult

__all__ = ["SkillPackage", "ValidationResult"]
