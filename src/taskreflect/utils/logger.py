import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s (%(filename)s:%(lineno)s)"


def get_logger(name: str, level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    Configures and returns a logger writing to stdout (or the given stream).
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Only attach a handler once so repeated calls do not duplicate output
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if name != "root":
        logger.propagate = False

    return logger


def parse_level(value) -> int:
    """Turn 'debug', 'INFO', '10' or an int into a logging level"""
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level
