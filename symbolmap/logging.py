from __future__ import annotations

import logging
import os
from typing import Optional


ROOT_LOGGER = "symbolmap"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if root.handlers:  # already configured
        return root

    env_level = os.getenv("SYMBOLMAP_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, env_level, logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.propagate = False
    return root


def get_logger(name: str, *, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger under the ``symbolmap`` root.

    The root gets a single stream handler on first use; module loggers
    propagate to it.

    Policy:
    - INFO: catalog loads (size, duration), reloads
    - WARNING: duplicate catalog symbols
    - DEBUG: settings at startup, registrations, cache-vs-remote decisions
    - Level from SYMBOLMAP_LOG_LEVEL env (default INFO). API keys are never logged.
    """

    _configure_root()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
