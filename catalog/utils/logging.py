# catalog/utils/logging.py
from loguru import logger
import sys
from pathlib import Path
from typing import Union

from catalog.config import LOG_DIR, LOG_LEVEL


class AppLogger:
    """Centralized logging configuration for the application"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        # Remove default logger
        logger.remove()
        logger.configure(extra={"module": "app"})

        logger.add(
            sys.stdout,
            colorize=True,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>",
            level=LOG_LEVEL
        )

        # File sinks only when a log directory is configured
        if not LOG_DIR:
            return

        self.log_path = Path(LOG_DIR)
        self.log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            self.log_path / "app.log",
            rotation="500 MB",
            retention="10 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} | {message}",
            level=LOG_LEVEL
        )

        logger.add(
            self.log_path / "error.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} | {message}",
            level="ERROR"
        )

    @staticmethod
    def get_logger(name: Union[str, None] = None):
        """Get a logger instance for a specific module"""
        return logger.bind(module=name if name else "app")


app_logger = AppLogger()


def get_logger(name: Union[str, None] = None):
    return app_logger.get_logger(name)
