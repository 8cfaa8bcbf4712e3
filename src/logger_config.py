import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from src.paths import LOGS, ensure_dirs

LOGGER_NAME = "marsweather"


def setup_logging(log_dir: str | None = None) -> logging.Logger:
    """Configure the application logger with console output and a rotating file."""
    if log_dir is None:
        log_dir = str(LOGS)
        ensure_dirs()

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Streamlit ajaa main.py:n uudelleen joka rerunilla -> handlerit vain kerran
    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setLevel(level)

    file_handler = RotatingFileHandler(
        Path(log_dir) / "marsweather.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console)
    logger.addHandler(file_handler)

    return logger
