"""Logging setup for the newsreel TUI.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the application configures handlers once at startup. While Textual owns
the terminal, log records go to a rotating file so they never draw over the UI.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import NEWSREEL_CONFIG_DIR

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_tui_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """
    Route logging to a rotating file for the lifetime of the TUI.

    The root logger is set to WARNING to avoid noise from third-party libs
    (urllib3 in particular). newsreel.* loggers use ``level``.

    Returns:
        Path of the log file.
    """
    log_dir = log_dir or NEWSREEL_CONFIG_DIR
    log_file = log_dir / "newsreel.log"

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        root = logging.getLogger()
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            root.addHandler(handler)
        root.setLevel(logging.WARNING)
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    logging.getLogger("newsreel").setLevel(getattr(logging, level.upper(), logging.INFO))
    return log_file
