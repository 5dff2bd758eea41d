"""
Logging setup for readme-html.

- Logs to stderr so rendered markup on stdout stays clean.
- Default level: WARNING, or DEBUG with ``verbose``. The environment variable
  README_HTML_LOG_LEVEL overrides the default.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "README_HTML_LOG_LEVEL"


def setup_logging(verbose: bool = False) -> logging.Logger:
    default_level = "DEBUG" if verbose else "WARNING"
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, default_level).upper()
    level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger("readme_html")
    logger.setLevel(level)
    logger.propagate = False  # avoid duplicate logs

    # Clear existing handlers if any (idempotent setup)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(handler)

    logger.debug("Logging initialized at level %s", level_name)
    return logger
