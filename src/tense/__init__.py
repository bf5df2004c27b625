# SPDX-License-Identifier: MIT

from tense.initialize import configure_logging
from tense.terminal.app import run


def main() -> None:
    configure_logging()
    run()


if __name__ == "__main__":
    main()
