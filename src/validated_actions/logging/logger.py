"""Logger factory for the wrappers.

- One stdout handler per named logger, pipe-separated fields
- Level from settings.app_log_level unless the caller passes one
- Validation outcomes are logged; payloads only when settings.log_payloads is on
"""

import logging
import sys
from typing import Optional, Union

from validated_actions.config.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = "validated_actions", level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return the named logger, attaching the stdout handler on first use.

    Every module does: `logger = setup_logger(__name__)`.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    resolved = settings.app_log_level if level is None else level
    logger.setLevel(resolved.upper() if isinstance(resolved, str) else resolved)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # Handled here; the root logger would print it a second time.
    logger.propagate = False
    return logger
