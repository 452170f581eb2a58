# streamprobe/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "streamprobe", level: int | str | None = None) -> logging.Logger:
    """
    Return a package logger. If nothing has configured logging yet (no root
    handlers, e.g. outside Uvicorn), add a basicConfig once.
    Level defaults to the configured `log_level` setting.
    """
    if level is None:
        from streamprobe.common.settings import get_settings
        level = get_settings().log_level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
