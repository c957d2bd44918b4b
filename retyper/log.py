"""Logging setup for ReTyper.

Everything logs under the ``retyper`` logger tree. Besides the standard
levels there is TRACE (5), used by the converter for per-text detail that
is too noisy even for ``--debug``:

    import retyper.log  # registers TRACE and Logger.trace()
    logger = logging.getLogger(__name__)
    logger.trace("%r -> %r", text, converted)

``setup_logging`` attaches the CLI handlers: a rotating file that always
receives DEBUG and up, and stderr showing warnings (everything with debug).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

TRACE: int = 5
LOGGER_NAME = 'retyper'
DEFAULT_LOG_FILE = '~/.retyper.log'

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s %(name)s: %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


if not hasattr(logging.Logger, "trace"):
    logging.Logger.trace = _trace  # type: ignore[attr-defined]


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Setup logging to both console and file

    Args:
        debug: Enable debug level logging
        log_file: Path to log file (default: ~/.retyper.log)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Repeated calls (tests, embedding) replace earlier handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_file = os.path.expanduser(log_file or DEFAULT_LOG_FILE)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,  # 1 MB
            backupCount=3,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    return logger
