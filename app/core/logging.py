import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging() -> logging.Logger:
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    logger = logging.getLogger("app")
    logger.setLevel(level)
    return logger


def get_logger(name: str = None) -> logging.Logger:
    # module loggers (app.db.repository, ...) inherit level/handlers from "app"
    return logging.getLogger(name or "app")
