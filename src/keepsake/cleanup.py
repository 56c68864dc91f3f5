# SPDX-License-Identifier: MIT

import atexit

from keepsake.repository.configuration import CONFIGURATION_REPO


def register_cleanup() -> None:
    """Save configuration changes made by a command once the process exits."""
    atexit.register(CONFIGURATION_REPO.flush)
