"""File logging for the Textual cheatsheet app.

The TUI draws in an alternate screen buffer, so Loguru's default stderr sink
would flash above the UI. While the app runs, records go to the file named in
``LoggingConfig`` instead.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from lazykeys.utils.config import LoggingConfig


def setup_tui_logging(config: LoggingConfig | None = None) -> Path | None:
    """Replace every Loguru sink with the configured rotating log file.

    Args:
        config: Logging settings (level, file, rotation, retention)

    Returns:
        Path of the log file, or None when ``LAZYKEYS_TUI_DISABLE_LOG_RECONFIG=1``
        leaves the current sinks in place
    """
    if os.getenv("LAZYKEYS_TUI_DISABLE_LOG_RECONFIG") == "1":
        return None

    config = config or LoggingConfig()
    target = Path(config.file)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(target),
        level=config.level,
        rotation=config.rotation,
        retention=config.retention,
        compression="zip",
    )
    logger.debug("TUI logging to {} at {}", target, config.level)
    return target
