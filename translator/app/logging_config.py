import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("translator")

handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    if handler not in logger.handlers:
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
