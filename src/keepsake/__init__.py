# SPDX-License-Identifier: MIT

from keepsake.cleanup import register_cleanup
from keepsake.initialize import initialize
from keepsake.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
