# api/core/logging.py
import logging
import os
import sys
from typing import Dict

from config import AppSettings
from utils.logging import JsonFormatter


def setup_logging(settings: AppSettings) -> None:
    """
    Configures the application's logging system based on settings.

    This function sets the log level, format (standard or JSON), and handlers
    (console and optional file).

    Args:
        settings: The application settings object.
    """
    log_level_map: Dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(settings.LOG_LEVEL.upper(), logging.INFO)

    if settings.JSON_LOGS:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    # Set log levels for key modules
    for module in ["api", "analysis", "utils"]:
        logging.getLogger(module).setLevel(log_level)

    logging.getLogger(__name__).info(
        f"Logging configured with level: {settings.LOG_LEVEL}, JSON: {settings.JSON_LOGS}"
    )
