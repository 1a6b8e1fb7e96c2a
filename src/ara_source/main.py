from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and reports unexpected crashes on
stderr with a full traceback. Load failures are not crashes: they are
rendered by the CLI and mapped to exit codes.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Make the package importable when this file is run directly from a checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Log and print an unhandled exception, then exit with status 1."""
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("ara_source.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (ARA-SOURCE CLI)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


def main() -> int:
    from ara_source.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
