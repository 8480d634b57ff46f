"""Configuration loading for blockjump.

Settings are read from ~/.config/blockjump/config.yaml (or the directory in
BLOCKJUMP_CONFIG_DIR). Every key is optional:

    toggle_keys: ["ctrl+j"]
    close_keys: ["escape"]
    blocks_path: ~/my-catalog/blocks.json
    patterns_path: ~/my-catalog/patterns.json
    score_threshold: 0.45
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigurationError
from .constants import (
    BLOCKJUMP_CONFIG_DIR,
    CONFIG_FILE_NAME,
    DEFAULT_CLOSE_KEYS,
    DEFAULT_SCORE_THRESHOLD,
    DEFAULT_TOGGLE_KEYS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JumpConfig:
    """Resolved settings for one blockjump session."""

    toggle_keys: tuple[str, ...] = DEFAULT_TOGGLE_KEYS
    close_keys: tuple[str, ...] = DEFAULT_CLOSE_KEYS
    blocks_path: Path | None = None
    patterns_path: Path | None = None
    score_threshold: float = DEFAULT_SCORE_THRESHOLD


def get_config_path(config_dir: Path | None = None) -> Path:
    """Get path to the YAML config file."""
    return (config_dir or BLOCKJUMP_CONFIG_DIR) / CONFIG_FILE_NAME


def _key_list(raw: dict[str, Any], name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = raw.get(name)
    if value is None:
        return default
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value or not all(
        isinstance(k, str) and k for k in value
    ):
        raise ConfigurationError("Expected a non-empty list of key names", setting=name)
    return tuple(value)


def _optional_path(raw: dict[str, Any], name: str) -> Path | None:
    value = raw.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError("Expected a file path", setting=name)
    return Path(value).expanduser()


def parse_config(raw: dict[str, Any]) -> JumpConfig:
    """
    Turn a parsed YAML mapping into a JumpConfig.

    Raises:
        ConfigurationError: If a known key holds a value of the wrong type
    """
    threshold = raw.get("score_threshold", DEFAULT_SCORE_THRESHOLD)
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ConfigurationError("Expected a number", setting="score_threshold")
    if not 0 <= threshold <= 1:
        raise ConfigurationError(
            "Score threshold must be between 0 and 1", setting="score_threshold"
        )

    known = {"toggle_keys", "close_keys", "blocks_path", "patterns_path", "score_threshold"}
    unknown = sorted(str(k) for k in raw if k not in known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {unknown}")

    return JumpConfig(
        toggle_keys=_key_list(raw, "toggle_keys", DEFAULT_TOGGLE_KEYS),
        close_keys=_key_list(raw, "close_keys", DEFAULT_CLOSE_KEYS),
        blocks_path=_optional_path(raw, "blocks_path"),
        patterns_path=_optional_path(raw, "patterns_path"),
        score_threshold=float(threshold),
    )


def load_config(config_dir: Path | None = None) -> JumpConfig:
    """
    Load configuration from config.yaml.

    Returns:
        JumpConfig, or defaults if the file doesn't exist or can't be parsed
    """
    config_path = get_config_path(config_dir)

    if not config_path.exists():
        return JumpConfig()

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.error(f"Failed to load config from {config_path}: {e}")
        return JumpConfig()

    if raw is None:
        return JumpConfig()
    if not isinstance(raw, dict):
        raise ConfigurationError("Config file must contain a mapping", path=str(config_path))

    return parse_config(raw)
