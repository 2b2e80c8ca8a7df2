# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup for the restproxy logger hierarchy."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "restproxy"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None, handler: logging.Handler | None = None) -> logging.Logger:
    """
    Attach a handler to the `restproxy` logger and set its level.

    The level falls back to RESTPROXY_LOG_LEVEL, then WARNING. Only the
    package logger is touched; the root logger of the host application is not.
    Calling it again replaces the handler installed by the previous call.
    """
    effective_level = (level or os.getenv("RESTPROXY_LOG_LEVEL") or "WARNING").upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, effective_level, logging.WARNING))

    for existing in [h for h in logger.handlers if getattr(h, "_restproxy_handler", False)]:
        logger.removeHandler(existing)
    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._restproxy_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "setup_logging"]
