"""
Logging configuration for the tray application.

Logs go to stdout and, when the state directory is writable, to a rotating
application.log file.
"""

import sys
import os
import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

import config.constants as constants
from _version import __version__

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def find_log_dir() -> Optional[Path]:
    """Find the log directory (with directory creation).

    Uses $XDG_STATE_HOME/nordvpn-tray, defaulting to ~/.local/state/nordvpn-tray.

    Returns:
        Path to log directory, or None if it could not be created
    """
    try:
        state_base = Path(os.environ.get("XDG_STATE_HOME") or Path.home() / ".local" / "state")
        app_state = state_base / constants.APP_DIR
        app_state.mkdir(parents=True, exist_ok=True)
        return app_state
    except (RuntimeError, OSError):
        return None


def setup_logging(app_name: str, log_dir: Optional[Path], debug: bool = False) -> None:
    """Setup logging for the application.

    Args:
        app_name: Name of the application for logging messages
        log_dir: Directory for application.log, None for stdout only
        debug: Log at DEBUG instead of INFO
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_dir:
        log_file = log_dir / constants.LOG_FILE
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file handler: {e}", file=sys.stderr)

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers
    )

    logger.info(f"{app_name} {__version__} starting")
    if log_dir:
        logger.info(f"Log file: {log_dir / constants.LOG_FILE}")
