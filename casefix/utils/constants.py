"""
Constants and Enumerations for casefix.

This module consolidates the naming styles, symbol kinds, pattern sources,
sentinel names and diagnostic strings used across the package, providing a
single source of truth for them.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Naming Styles and Symbol Kinds
# =============================================================================

class NamingStyle(Enum):
    """Casing conventions an identifier can be checked against."""

    UPPER_CAMEL_CASE = "UpperCamelCase"  # Types and methods
    LOWER_CAMEL_CASE = "lowerCamelCase"  # Locals
    SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"  # Public constants


class SymbolKind(Enum):
    """Coarse classification of the entity an identifier is bound to."""

    TYPE = "type"
    METHOD = "method"
    LOCAL = "local"
    FIELD = "field"
    OTHER = "other"


class CapitalizationStrategy(Enum):
    """How the rewriter decides where words begin."""

    DIGIT_TRIGGERED = "digit"  # Capitalize the letter following a digit or underscore
    WORD_SPLIT = "word"  # Tokenize into words and title-case each one


# =============================================================================
# Identifier Alphabet and Style Patterns
# =============================================================================

# Anything outside this class is removed during sanitization
DISALLOWED_IDENTIFIER_CHARS = r"[^A-Za-z0-9_]"
DISALLOWED_CONSTANT_CHARS = r"[^A-Za-z_]"
UNDERSCORE_RUN_PATTERN = r"_+"

# An uppercase letter may never directly follow another uppercase letter
UPPER_CAMEL_CASE_PATTERN = r"(?:[A-Z](?![A-Z])[a-z]*[0-9]*)+"
LOWER_CAMEL_CASE_PATTERN = r"[a-z]+[0-9]*(?:[A-Z](?![A-Z])[a-z]*[0-9]*)*"
SCREAMING_SNAKE_CASE_PATTERN = r"[A-Z]+(?:_[A-Z]+)*"

STYLE_PATTERN_SOURCES = {
    NamingStyle.UPPER_CAMEL_CASE: UPPER_CAMEL_CASE_PATTERN,
    NamingStyle.LOWER_CAMEL_CASE: LOWER_CAMEL_CASE_PATTERN,
    NamingStyle.SCREAMING_SNAKE_CASE: SCREAMING_SNAKE_CASE_PATTERN,
}


# =============================================================================
# Sentinel Names
# =============================================================================

DEFAULT_TYPE_SENTINEL = "FixMeClass"
DEFAULT_METHOD_SENTINEL = "FixMeMethod"
DEFAULT_LOCAL_SENTINEL = "fixMeVariable"
DEFAULT_CONSTANT_SENTINEL = "FIX_ME_CONST"
DEFAULT_OTHER_SENTINEL = "FixMe"


# =============================================================================
# Diagnostics
# =============================================================================

DIAGNOSTIC_ID = "CN0001"
DIAGNOSTIC_CATEGORY = "Naming"
DIAGNOSTIC_MESSAGE_FORMAT = (
    "Name '{name}' does not follow {style} convention; consider '{suggestion}'"
)


# =============================================================================
# Environment Variables
# =============================================================================

ENV_LOG_LEVEL = "CASEFIX_LOG_LEVEL"
ENV_CONFIG_FILE = "CASEFIX_CONFIG"
ENV_STRATEGY = "CASEFIX_STRATEGY"
ENV_RETAIN_DIGITS = "CASEFIX_RETAIN_DIGITS"

TRUTHY_VALUES = ("1", "true", "yes", "on")
FALSY_VALUES = ("0", "false", "no", "off")

DEFAULT_CONFIG_FILENAMES = ("casefix.yaml", "casefix.yml", "casefix.json")
