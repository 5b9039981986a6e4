"""
Logging for the subsetting commands.

Everything logs through the ``webfont_subset`` logger; the root handler set up
here prints ``LEVEL: message`` lines to stderr.
"""

import logging

LOGGER_NAME = "webfont_subset"
LOG_FORMAT = "%(levelname)s: %(message)s"

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger(LOGGER_NAME)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if verbose:
        logger.debug("Debug logging enabled")
