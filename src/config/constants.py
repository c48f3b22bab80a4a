"""
Application constants and configuration values
"""

# Application directory name for storing user data
APP_DIR = "nordvpn-tray"

# File names for configuration and data storage
APP_SETTINGS_FILE = "settings.yaml"
LOG_FILE = "application.log"

# NordVPN command line client
DEFAULT_NORDVPN_BINARY = "nordvpn"

# Poll delays in seconds
DEFAULT_POLL_MIN_DELAY = 1
DEFAULT_POLL_MAX_DELAY = 30

# Value used for any status field that could not be parsed
UNKNOWN = "Unknown"

# Group reported when not connected through one of the known server groups
DEFAULT_GROUP = "Standard"
