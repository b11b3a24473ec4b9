"""
config/log_config.py
──────────────────────────────────────────────────────────────────────────────
Process-wide logging setup shared by the API, CLI and Streamlit entry points.

Every module logs through ``logging.getLogger(__name__)``; only entry points
call configure_logging().
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Apply the standard format at the given level.

    Unknown level names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
