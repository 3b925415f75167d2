"""Config loading for ``skillpack.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillpack.config.model import SkillpackConfig
from skillpack.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from skillpack.constants.packaging import (
    DEFAULT_ARCHIVE_SUFFIX,
    DEFAULT_COMPRESSION_LEVEL,
    MAX_COMPRESSION_LEVEL,
    MIN_COMPRESSION_LEVEL,
)
from skillpack.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path | None = None, config_path: Path | None = None) -> SkillpackConfig:
    """Load packaging config from ``skillpack.yaml`` or an explicit path.

    ``root`` defaults to the current working directory. A missing implicit
    config yields defaults; a missing explicit one is an error.
    """
    root = (root or Path.cwd()).resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillpackConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s) in {path}: {', '.join(unknown)}. "
            f"Allowed keys: {', '.join(sorted(ALLOWED_CONFIG_KEYS))}"
        )

    logger.debug("Loaded config from %s", path)
    return SkillpackConfig(
        compression_level=_compression_level(raw.get("compression_level", DEFAULT_COMPRESSION_LEVEL)),
        archive_suffix=_archive_suffix(raw.get("archive_suffix", DEFAULT_ARCHIVE_SUFFIX)),
        validate=_ensure_bool(raw.get("validate", True), "validate"),
    )


def _compression_level(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("compression_level must be an integer")
    if not MIN_COMPRESSION_LEVEL <= value <= MAX_COMPRESSION_LEVEL:
        raise ConfigError(
            f"compression_level must be between {MIN_COMPRESSION_LEVEL} and {MAX_COMPRESSION_LEVEL}, got {value}"
        )
    return value


def _archive_suffix(value: Any) -> str:
    if not isinstance(value, str) or not value.startswith(".") or len(value) < 2 or "/" in value:
        raise ConfigError(f"archive_suffix must be a file extension such as '.zip', got {value!r}")
    return value


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value
