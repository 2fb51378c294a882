"""
Naming package for casefix.

Tokenizer, style classifier and name rewriter for identifier naming
conventions, plus the batch analyzer built on top of them.
"""

from .symbols import (
    SymbolDescriptor,
    style_for,
    descriptor_from_name,
    style_from_name,
    KIND_NAMES,
)
from .tokenizer import tokenize
from .classifier import (
    ClassificationResult,
    StylePatterns,
    classify,
    classify_symbol,
    is_compliant,
)
from .policy import (
    RewritePolicy,
    SentinelNames,
    DEFAULT_POLICY,
    get_default_policy,
    parse_strategy,
)
from .rewriter import rewrite, suggest, transform
from .analyzer import NamingAnalyzer, NamingViolation

__all__ = [
    "SymbolDescriptor",
    "style_for",
    "descriptor_from_name",
    "style_from_name",
    "KIND_NAMES",
    "tokenize",
    "ClassificationResult",
    "StylePatterns",
    "classify",
    "classify_symbol",
    "is_compliant",
    "RewritePolicy",
    "SentinelNames",
    "DEFAULT_POLICY",
    "get_default_policy",
    "parse_strategy",
    "rewrite",
    "suggest",
    "transform",
    "NamingAnalyzer",
    "NamingViolation",
]
