"""Configuration utilities for blockjump."""

from .constants import BLOCKJUMP_CONFIG_DIR
from .settings import JumpConfig, get_config_path, load_config, parse_config

__all__ = [
    "BLOCKJUMP_CONFIG_DIR",
    "JumpConfig",
    "get_config_path",
    "load_config",
    "parse_config",
]
