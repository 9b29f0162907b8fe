"""Configuration management for vrtools.

Supports loading configuration from:
1. Environment variables (VRTOOLS_*)
2. Config file (~/.vrtools/config.yaml)
3. Default values

Example config file (~/.vrtools/config.yaml):
    payload:
      key: "GImage:Data"
      namespace_hint: "google"
      min_length: 1000
    output:
      quality: 90
      suffix: "-converted"
      default_extension: "jpg"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".vrtools" / "config.yaml",
    Path.home() / ".config" / "vrtools" / "config.yaml",
    Path(".vrtools.yaml"),
]

# XMP property holding the right-eye JPEG (Google VR180 / Cardboard Camera)
DEFAULT_PAYLOAD_KEY = "GImage:Data"
DEFAULT_NAMESPACE_HINT = "google"
# Embedded stereo images are always large; shorter base64 runs are unrelated text
DEFAULT_MIN_PAYLOAD_LENGTH = 1000
DEFAULT_JPEG_QUALITY = 90


@dataclass
class PayloadConfig:
    """Right-eye payload search configuration."""

    key: str = DEFAULT_PAYLOAD_KEY
    namespace_hint: str = DEFAULT_NAMESPACE_HINT
    min_length: int = DEFAULT_MIN_PAYLOAD_LENGTH


@dataclass
class OutputConfig:
    """Output image configuration."""

    quality: int = DEFAULT_JPEG_QUALITY
    suffix: str = "-converted"
    default_extension: str = "jpg"


@dataclass
class VRToolsConfig:
    """Main configuration for vrtools."""

    payload: PayloadConfig = field(default_factory=PayloadConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from YAML file if available."""
    try:
        import yaml
    except ImportError:
        return {}

    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                    return data if data else {}
            except (OSError, yaml.YAMLError) as e:
                logger.debug("Skipping unreadable config {}: {}", config_path, e)
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with VRTOOLS_ prefix."""
    return os.environ.get(f"VRTOOLS_{key}", default)


def load_config() -> VRToolsConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (VRTOOLS_*)
    2. Config file (~/.vrtools/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config()

    payload_config = file_config.get("payload") or {}
    payload = PayloadConfig(
        key=_get_env("PAYLOAD_KEY") or payload_config.get("key", DEFAULT_PAYLOAD_KEY),
        namespace_hint=_get_env("NAMESPACE_HINT")
        or payload_config.get("namespace_hint", DEFAULT_NAMESPACE_HINT),
        min_length=int(
            _get_env("MIN_PAYLOAD_LENGTH")
            or payload_config.get("min_length", DEFAULT_MIN_PAYLOAD_LENGTH)
        ),
    )

    output_config = file_config.get("output") or {}
    output = OutputConfig(
        quality=int(_get_env("JPEG_QUALITY") or output_config.get("quality", DEFAULT_JPEG_QUALITY)),
        suffix=_get_env("OUTPUT_SUFFIX") or output_config.get("suffix", "-converted"),
        default_extension=_get_env("DEFAULT_EXTENSION")
        or output_config.get("default_extension", "jpg"),
    )

    return VRToolsConfig(payload=payload, output=output)


# Global config instance (lazy loaded)
_config: VRToolsConfig | None = None


def get_config() -> VRToolsConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
