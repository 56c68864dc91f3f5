# SPDX-License-Identifier: MIT

import logging

from keepsake import configuration
from keepsake.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)


def initialize() -> None:
    """
    Prepare a first run: write the default config file if there is none,
    then resolve the data directory and make sure it exists.
    """
    if not configuration.APP_CONFIG_PATH.is_file():
        __write_default_configuration()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)


def __write_default_configuration() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    CONFIGURATION_REPO.update_config()
    CONFIGURATION_REPO.flush()
    logger.info(f"Wrote default configuration to {configuration.APP_CONFIG_PATH}")
