import logging
from pathlib import Path

from vdjscore.engine.utils.config import LoggingSettings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

def setup_logging(settings: LoggingSettings) -> logging.Logger:
    logger = logging.getLogger("vdjscore")
    logger.setLevel(getattr(logging, settings.level.upper(), logging.INFO))
    # reconfiguring replaces handlers rather than stacking them
    logger.handlers.clear()
    handlers: list[logging.Handler] = []
    if settings.console:
        handlers.append(logging.StreamHandler())
    if settings.file:
        log_path = Path(settings.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"vdjscore.{name}")
