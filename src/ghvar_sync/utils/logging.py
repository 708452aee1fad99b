"""Logging configuration and utilities."""

import logging
import logging.handlers
import time
from pathlib import Path
from typing import Optional

LOGGER_NAME = "ghvar_sync"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    log_to_console: bool = True,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """Setup logging configuration.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        log_to_console: Whether to log to console (stderr)
        max_file_size: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
        
    Returns:
        Configured logger
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.handlers.clear()
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


class TimedOperation:
    """Log how long a block took, at ``level``.

    An exception leaving the block is logged at the same level and re-raised;
    reporting it to the user is left to the caller.
    """

    def __init__(self, logger: logging.Logger, operation_name: str, level: int = logging.INFO):
        self.logger = logger
        self.operation_name = operation_name
        self.level = level
        self.elapsed: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.monotonic()
        self.logger.log(self.level, f"{self.operation_name}: started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.monotonic() - self._started
        if exc_type is None:
            self.logger.log(self.level, f"{self.operation_name}: finished in {self.elapsed:.2f}s")
        else:
            self.logger.log(self.level, f"{self.operation_name}: aborted after {self.elapsed:.2f}s ({exc_val})")
        return False
