"""
Logging configuration for gitwebhooks.
"""
import logging
import sys

# Package logger; parsers only emit DEBUG records through it.
logger = logging.getLogger("gitwebhooks")
logger.addHandler(logging.NullHandler())


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger."""

    # Set level based on debug mode
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger
