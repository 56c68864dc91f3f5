# SPDX-License-Identifier: MIT

"""
Application paths, defaults and storage keys.

Settings live in a YAML file under the platform's config directory. Journal
data lives in the platform's data directory unless ``data_path`` says
otherwise.
"""

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs
from yaml import load

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore[assignment]

APP_NAME = "keepsake"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Replaced by load_data_path_configuration() when data_path is set
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

DEFAULT_SHARE_ORIGIN = "http://localhost:3000"
DEFAULT_CONNECTIVITY_HOST = "1.1.1.1"
DEFAULT_CONNECTIVITY_PORT = 53
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Storage keys, one JSON document each
ENTRIES_KEY = "journal-entries"
DELETED_ENTRIES_KEY = "journal-deleted-entries"
AUTH_KEY = "journal-auth"
PIN_KEY = "journal-pin-settings"
THEME_KEY = "journal-theme-settings"
REMINDERS_KEY = "journal-reminders"
SHARE_LINKS_KEY = "journal-share-links"
OFFLINE_QUEUE_KEY = "journal-offline-queue"
OFFLINE_STATUS_KEY = "journal-offline-status"


class Configuration(TypedDict):
    data_path: Optional[str]  # None means the platform data directory
    share_origin: str
    storage_quota_bytes: Optional[int]
    connectivity_host: str
    connectivity_port: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "share_origin": DEFAULT_SHARE_ORIGIN,
        "storage_quota_bytes": None,
        "connectivity_host": DEFAULT_CONNECTIVITY_HOST,
        "connectivity_port": DEFAULT_CONNECTIVITY_PORT,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def read_configuration_file() -> dict:
    """The raw settings in the config file, or an empty dict without one."""
    if not APP_CONFIG_PATH.is_file():
        return {}
    return load(APP_CONFIG_PATH.read_text(), Loader=SafeLoader) or {}


def load_data_path_configuration() -> None:
    """
    Point DATA_PATH at the configured data directory. Call this before the
    journal storage is opened.
    """
    global DATA_PATH

    data_path = read_configuration_file().get("data_path")
    if data_path is not None:
        DATA_PATH = Path(data_path).expanduser()
