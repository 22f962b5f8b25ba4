import logging
import sys

from tierboard.config import LOG_LEVEL


def setup_logging(level=LOG_LEVEL):
    logger = logging.getLogger()
    if logger.hasHandlers():
        logger.handlers.clear()
    level_value = logging.getLevelName(level)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logger.setLevel(level_value)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
            datefmt="%m-%d-%Y %H:%M:%S",
        ),
    )
    logger.addHandler(handler)
    return logger


logger = setup_logging()
