"""Module: casefix.config.app

Author: Michael Economou
Date: 2026-01-01

Application-level configuration: app info and logging settings.
"""

import os

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "casefix"
APP_VERSION = "1.0"
APP_AUTHOR = "Michael Economou"
APP_DESCRIPTION = "Rename files into a chosen casing convention"

# =====================================
# LOGGING CONFIGURATION
# =====================================

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "ERROR"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 2_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Get user configuration directory based on OS."""
    if os.name == "nt":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(base_dir, app_name)


def get_default_log_dir() -> str:
    return os.path.join(get_user_config_dir(), "logs")
