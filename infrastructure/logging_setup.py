"""Logging configuration for the API process."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = "info") -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Level name as accepted by uvicorn ("debug", "info", ...) or a
            logging constant. Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = getattr(logging, level.strip().upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
