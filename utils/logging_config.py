import logging
import os


def setup_logging(level=None):
    """Sets up console logging for the bench runner and the API."""
    level = (level or os.getenv("KMP_LOG_LEVEL", "INFO")).upper()

    # Clear all existing handlers to prevent duplication
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    # Operator-facing output goes to stderr, the report itself goes to stdout
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
