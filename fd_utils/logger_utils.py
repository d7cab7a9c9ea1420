import logging
import os
import sys
from pythonjsonlogger import jsonlogger


def get_logger(name: str, log_level: str = "INFO"):
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False

    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


# Default instance, shared by the app factory and services
logger = get_logger("flashdeck", os.environ.get("LOG_LEVEL", "INFO"))
