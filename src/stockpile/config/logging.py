"""Logging setup for the stockpile CLI."""

from __future__ import annotations

import logging

_NOISY_LOGGERS = ("httpx", "httpcore", "alembic.runtime.migration")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger with a terse CLI format.

    Third-party loggers that chatter at INFO (HTTP transport, migration runner) are
    raised to WARNING unless ``level`` asks for DEBUG output.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
