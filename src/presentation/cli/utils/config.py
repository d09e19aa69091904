"""Configuration utilities for CLI."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ....infrastructure.config.analytics_config import AnalyticsConfig


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    # Expand environment variables
    return _expand_env_vars(config)


def validate_config(config: Dict[str, Any]) -> bool:
    """Validate configuration structure.

    Args:
        config: Configuration dictionary

    Returns:
        True if configuration is valid
    """
    if not isinstance(config, dict):
        return False

    analytics_section = config.get("analytics", {})
    if not isinstance(analytics_section, dict):
        return False

    try:
        AnalyticsConfig.from_dict(analytics_section)
    except (TypeError, ValueError):
        return False

    return True


def build_analytics_config(config: Optional[Dict[str, Any]] = None) -> AnalyticsConfig:
    """Build analytics settings from environment, overridden by a config file section.

    Args:
        config: Loaded configuration dictionary, if any

    Returns:
        Analytics configuration
    """
    base = AnalyticsConfig.from_env()
    if not config:
        return base

    return AnalyticsConfig.from_dict(config.get("analytics", {}), base=base)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, or string)

    Returns:
        Object with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj
