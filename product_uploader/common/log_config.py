"""
Logging setup for upload runs.

Per-row outcomes (created products, added or rejected metafields) are
logged to stderr; stdout only carries the end-of-run summary box.
"""

import logging
import sys

LOGGER_NAME = "product_uploader"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG    # includes request payloads
    if quiet:
        return logging.WARNING  # failures and bad numeric cells only
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Attach a stderr handler to the package logger.

    Safe to call more than once; the previous handler is replaced.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_for(verbose, quiet))
    logger.handlers.clear()
    logger.addHandler(handler)
