import logging
import sys

from colorlog import ColoredFormatter

import src.constants as CONSTANTS

DEBUG_MODE = False


def setup_logger(debug_mode=False):
    logger = logging.getLogger(CONSTANTS.LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create colored formatter
    formatter = ColoredFormatter(
        "%(log_color)s[%(levelname)s] %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "red,bg_white",
        }
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)
    else:
        for existing in logger.handlers:
            existing.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    return logger


def configure_logger(mode: str):
    """
    Re-level the shared logger from a suite mode string.

    Args:
        mode: "DEBUG" enables debug output, anything else logs at INFO
    """
    global logger, DEBUG_MODE
    DEBUG_MODE = (mode or "").upper() == "DEBUG"
    logger = setup_logger(debug_mode=DEBUG_MODE)
    if DEBUG_MODE:
        logger.debug("Debug mode is active.")
    return logger


# Logger defaults to INFO until configure_logger() runs.
logger = setup_logger(debug_mode=DEBUG_MODE)
