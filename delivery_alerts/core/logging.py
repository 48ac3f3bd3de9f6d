"""Logging configuration."""
import logging
import sys
from typing import Optional

from delivery_alerts.core.config import Settings, settings as default_settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DIAGNOSTIC_FORMAT = "%(asctime)s %(message)s"


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure application logging.

    Records go to stdout and are appended to the diagnostic log file, one
    ``<timestamp> <message>`` line per record. The file is opened in append
    mode so earlier runs are never overwritten.
    """
    config = config or default_settings

    diagnostic_handler = logging.FileHandler(
        config.log_file, mode="a", encoding="utf-8"
    )
    diagnostic_handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))

    logging.basicConfig(
        level=config.log_level.upper(),
        format=CONSOLE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
    logging.getLogger().addHandler(diagnostic_handler)

    # Set third-party loggers to WARNING
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
