"""
Logging setup for the command-line front end. Library modules only
create their own loggers and never attach handlers.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("pwengine")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Avoid stacking handlers when main() runs more than once in a process.
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
