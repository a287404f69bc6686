from __future__ import annotations

"""
Configuration Domain Management.

Defines the default check configuration and its JSON persistence. A project
may carry a '.npmfs.json' file next to its manifest to override the default
npm layout; missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from npmfs.domain.structure_models import (
    DEFAULT_MANIFEST_NAME,
    default_manifest_keys,
    default_npm_structure,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = ".npmfs.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default check configuration.

    Returns:
        Dict[str, Any]: Fresh default configuration values.
    """
    required, optional = default_npm_structure()
    return {
        # Target
        "root_path": os.getcwd(),
        "discover_root": False,
        "manifest_name": DEFAULT_MANIFEST_NAME,

        # Declared layout
        "required_dirs": list(required.directories),
        "required_files": list(required.files),
        "optional_dirs": list(optional.directories),
        "optional_files": list(optional.files),

        # Manifest expectations
        "required_manifest_keys": default_manifest_keys(),
        "required_scripts": [],

        # Behaviour
        "measure_size": False,
        "fail_on_optional": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def resolve_config_path(path: Optional[str] = None) -> str:
    """Return ``path`` or the default config file in the working directory."""
    if path:
        return os.path.abspath(path)
    return os.path.join(os.getcwd(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a configuration file merged over the defaults.

    Args:
        path: Explicit config file. Defaults to '.npmfs.json' in the
              working directory.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config = get_default_config()
    config_path = resolve_config_path(path)

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    logger.debug(f"Loaded configuration from '{config_path}'")
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist a configuration to disk.

    Args:
        config: Configuration to save.
        path: Destination file. Defaults to '.npmfs.json' in the working
              directory.

    Returns:
        bool: True if the file was written.
    """
    config_path = resolve_config_path(path)
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        parent = os.path.dirname(config_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to '{config_path}'")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
