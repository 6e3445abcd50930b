import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {level!r}")

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    root_logger.setLevel(level)
