"""Skillpack: validate and package skill folders for distribution."""

__version__ = "0.1.0"
