from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration and loads optional user
overrides from a JSON file stored in the application data directory.
"""

import json
import logging
import os
from typing import Any, Dict

from treecraft.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"


def get_config_file() -> str:
    """Absolute path of the persistent user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the build engine.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": "",
        "encoding": DEFAULT_ENCODING,

        # Mode
        "preview": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "save_log_file": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load user overrides from disk on top of the defaults.

    Unknown keys are ignored. A missing or corrupted file yields the
    defaults unchanged.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key, value in data.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key: {key}")

    return config
