from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from user_manager.logging_config import configure_logging
from user_manager.settings import get_settings
from user_manager.shell import UserManagerShell
from user_manager.user_store import InMemoryUserStore

logger = logging.getLogger("user_manager")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="user-manager", description="Interactive in-memory user management menu.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides USER_MANAGER_LOG_LEVEL).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    # The store lives exactly as long as this session.
    store = InMemoryUserStore()
    shell = UserManagerShell(store, indent=settings.indent)
    logger.debug("Starting user manager session")
    try:
        return shell.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
