"""
casefix: identifier naming-convention classifier and rewriter.

Checks type, method, local and constant field names against their casing
convention and proposes compliant replacements for the ones that are not.

Usage:
    from casefix import SymbolDescriptor, classify_symbol, rewrite

    local = SymbolDescriptor.local()
    if not classify_symbol("my_variable", local):
        new_name = rewrite("my_variable", local)  # "myVariable"
"""

__version__ = "0.1.0"
__author__ = "casefix Team"
__email__ = "casefix@example.com"

# Public API exports
from .utils.constants import NamingStyle, SymbolKind, CapitalizationStrategy
from .naming import (
    SymbolDescriptor,
    style_for,
    tokenize,
    ClassificationResult,
    classify,
    classify_symbol,
    is_compliant,
    RewritePolicy,
    SentinelNames,
    rewrite,
    suggest,
    NamingAnalyzer,
    NamingViolation,
)
from .utils.config import get_config, CasefixConfig
from .utils.exceptions import CasefixError, ConfigurationError, UnknownSymbolKindError

__all__ = [
    "NamingStyle",
    "SymbolKind",
    "CapitalizationStrategy",
    "SymbolDescriptor",
    "style_for",
    "tokenize",
    "ClassificationResult",
    "classify",
    "classify_symbol",
    "is_compliant",
    "RewritePolicy",
    "SentinelNames",
    "rewrite",
    "suggest",
    "NamingAnalyzer",
    "NamingViolation",
    "get_config",
    "CasefixConfig",
    "CasefixError",
    "ConfigurationError",
    "UnknownSymbolKindError",
]
