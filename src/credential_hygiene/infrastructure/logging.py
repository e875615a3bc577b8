"""Shared logging configuration for credential hygiene processes."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_SQL_LOGGER_NAME = "sqlalchemy.engine"


def configure_logging(*, level: str, sql_echo: bool = False) -> None:
    """Configure root logging once and keep SQL statement logging opt-in."""

    normalized_level = level.strip().upper() if level.strip() else "INFO"
    resolved_level = getattr(logging, normalized_level, logging.INFO)

    logging.basicConfig(
        level=resolved_level,
        format=_LOG_FORMAT,
    )
    logging.getLogger(_SQL_LOGGER_NAME).setLevel(logging.INFO if sql_echo else logging.WARNING)
