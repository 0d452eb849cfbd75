# codeanalyzer/utils/logger.py

"""
Centralized logger configuration for CodeAnalyzer.

Provides a `get_logger(name: str)` function. On first request, it:
  - Configures a StreamHandler to stderr
  - Sets a default formatter: "YYYY-MM-DD HH:MM:SS LEVEL [logger_name] message"
  - Defaults to INFO level (can be overridden via the CODEANALYZER_LOG environment variable)
"""

import logging
import os

from codeanalyzer.utils.settings import ENV_LOG_LEVEL

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger named `codeanalyzer.<name>`. On first use, configures
    a StreamHandler with a default format. Honors CODEANALYZER_LOG if set
    to a valid level (DEBUG/INFO/WARNING/ERROR/CRITICAL).
    """
    base_name = "codeanalyzer"
    if name and (name == base_name or name.startswith(base_name + ".")):
        logger_name = name
    else:
        logger_name = f"{base_name}.{name}" if name else base_name
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)

        level = logging.INFO
        env_level = os.getenv(ENV_LOG_LEVEL, "").upper()
        if env_level in _VALID_LEVELS:
            level = getattr(logging, env_level)
        logger.setLevel(level)

        # Prevent double-logging: do not propagate to root
        logger.propagate = False

    return logger
