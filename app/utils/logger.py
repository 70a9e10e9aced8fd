from loguru import logger
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger.remove()
logger.add(
    sys.stdout,
    level=LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level: <4}</level> | "
           "<cyan>{extra[context]}</cyan> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    colorize=True,
    backtrace=True,
    diagnose=True
)
logger.configure(extra={"context": "Default"})

def get_logger(name: str = "Default"):
    """Return a logger instance with a given name."""
    return logger.bind(context=name)
