"""Package logging.

The library only installs a NullHandler; applications decide where records go.
``enable_debug_logging`` is a shortcut for interactive sessions.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "iterm2_images"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def enable_debug_logging(level: int | str = "DEBUG") -> logging.Logger:
    """Attach a rich handler writing to stderr to the package logger."""
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        # stdout is reserved for escape sequences
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
