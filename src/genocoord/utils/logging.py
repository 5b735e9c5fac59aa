"""Logging utilities for genocoord."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_file_logging(log_dir: Optional[Path], command_name: str, debug: bool = False, console_output: bool = False) -> logging.Logger:
    """Configure logging to a timestamped log file and optionally to the console.

    Args:
        log_dir: Directory to write log files to, or None to skip the log file
        command_name: Name of the command being run (e.g., 'convert', 'locus')
        debug: Whether to enable debug logging
        console_output: Whether to also log to stderr (default: False)

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout is reserved for command output
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
        log_file = log_dir / f"{timestamp}.{command_name}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
        print(f"{timestamp} - Logging to file: {log_file}", file=sys.stderr)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    return logging.getLogger('genocoord')
