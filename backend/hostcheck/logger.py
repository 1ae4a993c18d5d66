"""
Logging configuration.
"""
import logging
import sys
from typing import Optional

from hostcheck.config import settings
from hostcheck.errors import ConfigurationError

# Create logger
logger = logging.getLogger("hostcheck")
logger.setLevel(settings.LOG_LEVEL)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.DEBUG)

# Formatter
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
console_handler.setFormatter(formatter)

# Add handler
if not logger.handlers:
    logger.addHandler(console_handler)


class CheckLogger:
    """Severity-level reporting used while evaluating conditions.

    fail() is fatal: it logs the message and raises ConfigurationError, which
    is only caught at the entry point. debug() output is gated by an explicit
    verbose flag on top of the logger level.
    """

    def __init__(self, verbose: bool = False, log: Optional[logging.Logger] = None):
        self.verbose = verbose
        self.log = log or logger

    def fail(self, message: str, hint: Optional[str] = None):
        if hint:
            self.log.error(f"{message} {hint}")
        else:
            self.log.error(message)
        raise ConfigurationError(message, hint)

    def warn(self, message: str):
        self.log.warning(message)

    def debug(self, message: str):
        if self.verbose:
            self.log.debug(message)
