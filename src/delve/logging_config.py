import logging
import os

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool = False, default_level: int = logging.INFO) -> int:
    """Configure the root logger for the CLI and return the effective level.

    ``debug`` wins over everything; otherwise DELVE_LOG_LEVEL (a level name such
    as "warning") overrides ``default_level``.
    """
    level = default_level
    level_name = os.getenv("DELVE_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    if debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
