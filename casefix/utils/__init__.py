"""
Utils package for casefix.

This module provides constants, exceptions, logging, configuration and
string helpers shared by the naming components.
"""

# Core utilities
from .exceptions import CasefixError, ConfigurationError, UnknownSymbolKindError
from .constants import NamingStyle, SymbolKind, CapitalizationStrategy
from .string_utils import sanitize_identifier, collapse_underscores, is_degenerate

# Configuration and logging
from .config import (
    CasefixConfig,
    PolicyConfig,
    SentinelConfig,
    AnalyzerConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .logging import setup_logging, get_logger, CasefixLogger

__all__ = [
    # Core exceptions
    "CasefixError",
    "ConfigurationError",
    "UnknownSymbolKindError",

    # Enumerations
    "NamingStyle",
    "SymbolKind",
    "CapitalizationStrategy",

    # String utilities
    "sanitize_identifier",
    "collapse_underscores",
    "is_degenerate",

    # Configuration
    "CasefixConfig",
    "PolicyConfig",
    "SentinelConfig",
    "AnalyzerConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "setup_logging",
    "get_logger",
    "CasefixLogger",
]
