"""
Logging setup for VeinMiner.
"""

import logging
import sys
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """
    Configure logging for the veinminer package.

    Args:
        level: Level name such as "DEBUG". Defaults to the LOG_LEVEL setting.
            Unknown names fall back to INFO.

    Returns:
        The numeric level that was applied
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # Set level for our modules
    logging.getLogger("veinminer").setLevel(log_level)
    return log_level
