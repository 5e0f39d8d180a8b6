import logging
import sys


def setup_logger(name, level=logging.INFO):
    """
    Sets up a logger with the given name and level.
    Logs to stdout with a format including timestamp.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # avoid adding handlers twice
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger
