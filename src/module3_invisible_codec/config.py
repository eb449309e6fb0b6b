"""
Configuration loading for the invisible codec.

Reads default_config.yaml at the repository root if present; hard-coded
defaults fill anything missing.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from module2_stream_compression import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_LEVEL,
    DEFAULT_MAX_OUTPUT_SIZE,
)
from .errors import CodecConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "default_config.yaml",
)

_DEFAULTS: Dict[str, Any] = {
    "compression": {
        "buffer_size": DEFAULT_BUFFER_SIZE,
        "level": DEFAULT_LEVEL,
        "max_output_size": DEFAULT_MAX_OUTPUT_SIZE,
    }
}


def get_default_config() -> Dict[str, Any]:
    """Return a fresh copy of the hard-coded defaults."""
    return copy.deepcopy(_DEFAULTS)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML, falling back to defaults.

    Args:
        config_path: Path to a YAML file. If None, default_config.yaml at
            the repository root is used when it exists.

    Returns:
        Configuration dictionary with every section present

    Raises:
        CodecConfigurationError: If an explicitly given file cannot be read
            or parsed
    """
    explicit = config_path is not None
    path = config_path if explicit else DEFAULT_CONFIG_PATH

    if not os.path.exists(path):
        if explicit:
            raise CodecConfigurationError(f"Config file not found: {path}")
        return get_default_config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        if explicit:
            raise CodecConfigurationError(f"Failed to load config {path}: {e}") from e
        logger.warning("Could not load %s (%s); using built-in defaults", path, e)
        return get_default_config()

    if not isinstance(loaded, dict):
        raise CodecConfigurationError(f"Config root must be a mapping, got {type(loaded).__name__}")

    return merge_with_defaults(loaded)


def merge_with_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay config on top of the defaults, one section deep."""
    merged = get_default_config()
    for section, values in config.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def get_compression_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract and validate the compression section.

    Raises:
        CodecConfigurationError: On missing or out-of-range values
    """
    try:
        section = config["compression"]
        buffer_size = section["buffer_size"]
        level = section["level"]
        max_output_size = section["max_output_size"]
    except (KeyError, TypeError) as e:
        raise CodecConfigurationError(f"Missing required config key: {e}") from e

    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size <= 0:
        raise CodecConfigurationError(f"buffer_size must be a positive integer, got {buffer_size!r}")
    if isinstance(level, bool) or not isinstance(level, int) or not -1 <= level <= 9:
        raise CodecConfigurationError(f"level must be -1 or in [0, 9], got {level!r}")
    if max_output_size is not None and (
        isinstance(max_output_size, bool) or not isinstance(max_output_size, int) or max_output_size <= 0
    ):
        raise CodecConfigurationError(
            f"max_output_size must be a positive integer or null, got {max_output_size!r}"
        )

    return {
        "buffer_size": buffer_size,
        "level": level,
        "max_output_size": max_output_size,
    }
