# Path: core/logging_utils.py
# Purpose: Configure console logging for CLI tools and the API.
# Layer: core.
# Details: Modules log through logging.getLogger(__name__); entry points call configure_logging once.

from __future__ import annotations

import logging

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single console handler on the root logger at ``level``."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
