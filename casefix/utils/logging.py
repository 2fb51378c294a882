"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
casefix package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import ENV_LOG_LEVEL

ROOT_LOGGER_NAME = "casefix"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the casefix package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance nested under the ``casefix`` logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class CasefixLogger:
    """
    Component logger with helpers for the naming pipeline.

    Wraps a package logger and provides one method per event the
    analyzer reports, so message wording stays consistent.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_violation(self, name: str, style: str, suggestion: str) -> None:
        """
        Log a single naming violation.

        Args:
            name: Offending identifier
            style: Expected naming style
            suggestion: Proposed replacement
        """
        self.logger.debug(f"'{name}' violates {style}; suggesting '{suggestion}'")

    def log_sentinel(self, name: str, sentinel: str) -> None:
        """
        Log fallback to a sentinel name for degenerate input.

        Args:
            name: Identifier that had no usable characters
            sentinel: Placeholder returned instead
        """
        self.logger.debug(f"No usable characters in {name!r}, falling back to '{sentinel}'")

    def log_analysis_summary(self, checked: int, violations: int) -> None:
        """
        Log the outcome of a batch analysis.

        Args:
            checked: Number of identifiers examined
            violations: Number of non-compliant identifiers found
        """
        self.logger.debug(f"Analyzed {checked} identifiers, {violations} violation(s)")


# Initialize logging on module import
setup_logging()
