"""
Custom exception definitions.

This module defines the exception hierarchy for casefix-specific errors.
The naming core itself never raises; these errors come from configuration
loading and from parsing user-supplied kind or style names.
"""

from typing import Optional, Sequence


class CasefixError(Exception):
    """
    Base exception for all casefix-related errors.

    This is the root exception class for all casefix-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize casefix error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(CasefixError):
    """
    Raised when configuration cannot be loaded or holds invalid values.

    Covers unreadable or malformed config files, unknown strategy names
    and sentinel names that do not satisfy their own naming style.
    """

    def __init__(self, message: str, config_file: Optional[str] = None, key: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Optional path of the offending file
            key: Optional configuration key that was rejected
        """
        details = {}
        if config_file is not None:
            details['config_file'] = config_file
        if key is not None:
            details['key'] = key

        super().__init__(message, details)
        self.config_file = config_file
        self.key = key


class UnknownSymbolKindError(CasefixError):
    """
    Raised when a symbol kind or naming style name is not recognized.
    """

    def __init__(self, value: str, choices: Sequence[str] = ()):
        """
        Initialize unknown kind error.

        Args:
            value: The name that could not be resolved
            choices: Accepted names, reported to the user
        """
        message = f"Unknown symbol kind '{value}'"
        details = {}
        if choices:
            details['choices'] = "|".join(choices)

        super().__init__(message, details)
        self.value = value
        self.choices = tuple(choices)
