import re
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a single stderr sink at `level`."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def slugify(name: str) -> str:
    """'Real Madrid C.F.' -> 'real_madrid_c_f'"""
    slug = re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")
    return slug or "unnamed"
