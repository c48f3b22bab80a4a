"""
Application settings management
"""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any

from config.constants import (
    APP_SETTINGS_FILE, DEFAULT_NORDVPN_BINARY, DEFAULT_POLL_MIN_DELAY, DEFAULT_POLL_MAX_DELAY
)

logger = logging.getLogger(__name__)


class AppSettings:
    """Manages application settings and preferences"""

    def __init__(self, config_dir: Path):
        self.settings_file = config_dir / APP_SETTINGS_FILE
        self.settings: Dict[str, Any] = {}
        self.load_settings()

    def load_settings(self) -> None:
        """Load settings from YAML file"""
        try:
            if self.settings_file.exists():
                with open(self.settings_file, 'r') as f:
                    loaded = yaml.safe_load(f) or {}
                if not isinstance(loaded, dict):
                    logger.warning(f"Ignoring malformed settings file: {self.settings_file}")
                    loaded = {}
                self.settings = loaded
                logger.info("Loaded application settings")
            else:
                logger.info("No existing settings file found, starting with default settings")
                self.settings = {}
        except Exception as e:
            logger.error(f"Error loading settings: {e}")
            self.settings = {}

    def get_nordvpn_binary(self) -> str:
        """Get the name or path of the NordVPN command line client"""
        binary = self.settings.get('nordvpn_binary')
        if not binary:
            return DEFAULT_NORDVPN_BINARY
        return str(binary)

    def get_poll_delays(self) -> tuple[int, int]:
        """Get the (minimum, maximum) status poll delay in seconds"""
        minimum = self._get_positive_int('poll_min_delay', DEFAULT_POLL_MIN_DELAY)
        maximum = self._get_positive_int('poll_max_delay', DEFAULT_POLL_MAX_DELAY)
        if maximum < minimum:
            logger.warning(f"poll_max_delay {maximum} is below poll_min_delay {minimum}, using {minimum}")
            maximum = minimum
        return minimum, maximum

    def get_refresh_after_action(self) -> bool:
        """Whether to query the status right after a connect or disconnect"""
        return bool(self.settings.get('refresh_after_action', False))

    def _get_positive_int(self, key: str, default: int) -> int:
        value = self.settings.get(key, default)
        try:
            number = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid value for {key}: {value!r}, using {default}")
            return default
        if number < 1:
            logger.warning(f"{key} must be at least 1, using {default}")
            return default
        return number
