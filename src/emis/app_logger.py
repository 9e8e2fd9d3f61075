import logging

from emis.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging(level_name: str | None = None):
    level = getattr(logging, (level_name or settings.LOG_LEVEL).upper(), logging.INFO)

    # Library logger: never touch the root logger
    logger = logging.getLogger("EMIS")
    logger.setLevel(level)

    # Avoid duplicate console handlers
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)

    logger.propagate = False
    return logger

def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("EMIS")
    return base.getChild(name) if name else base

logger = setup_logging()
