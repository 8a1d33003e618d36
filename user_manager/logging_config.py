from __future__ import annotations

import logging


def configure_logging(level: str = "WARNING") -> None:
    """Console-friendly logging setup.

    Defaults to WARNING so store activity does not interleave with the menu.
    Raise the level via USER_MANAGER_LOG_LEVEL or ``--log-level`` when debugging.
    """
    logging.basicConfig(
        level=getattr(logging, (level or "").upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
