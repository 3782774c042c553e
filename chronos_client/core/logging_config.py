import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
PACKAGE_LOGGER = "chronos_client"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure root handlers once and set the package logger level."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
