"""
Common application setup functionality

This module provides shared functionality for setting up the application,
including directory initialization and logging configuration.
"""

import os
import logging
from pathlib import Path
from typing import Optional

import config.constants as constants
from common.logging_config import find_log_dir, setup_logging

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the XDG config directory for settings"""
    config_base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")  # e.g. ~/.config
    app_config = config_base / constants.APP_DIR
    app_config.mkdir(parents=True, exist_ok=True)
    return app_config


def initialize_app_environment(app_name: str, debug: bool = False) -> tuple[Path, Optional[Path]] | None:
    """Initialize the application environment (directories, logging)

    Args:
        app_name: Name of the application for logging messages
        debug: Whether to log at DEBUG level

    Returns:
        tuple: (config_dir, log_dir) if successful, None if failed
    """
    log_dir = find_log_dir()
    setup_logging(app_name, log_dir, debug=debug)

    try:
        config_dir = get_config_dir()
    except OSError as e:
        logger.error(f"Could not create config directory: {e}")
        return None

    return config_dir, log_dir
