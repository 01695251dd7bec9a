from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "STRING_TABLES_LOG_LEVEL"

logger = logging.getLogger("string_tables")


def _env_level(default: int | str) -> int | str:
    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return value or default


def init_logging(level: int | str | None = logging.WARNING) -> None:
    """
    Set up logging for command line entry points.

    `STRING_TABLES_LOG_LEVEL` wins over `level`; `level=None` leaves levels untouched.
    """
    fmt = "[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s"
    logging.basicConfig(format=fmt)
    logging.captureWarnings(True)
    if level is None:
        return
    logger.setLevel(_env_level(level))
