"""
String Manipulation Utilities for casefix.

Character-class predicates restricted to ASCII and the sanitization
helpers shared by the tokenizer and the rewriter.
"""

from __future__ import annotations

import re

from .constants import (
    DISALLOWED_IDENTIFIER_CHARS,
    DISALLOWED_CONSTANT_CHARS,
    UNDERSCORE_RUN_PATTERN,
)

_DISALLOWED_IDENTIFIER_RE = re.compile(DISALLOWED_IDENTIFIER_CHARS)
_DISALLOWED_CONSTANT_RE = re.compile(DISALLOWED_CONSTANT_CHARS)
_UNDERSCORE_RUN_RE = re.compile(UNDERSCORE_RUN_PATTERN)


# =============================================================================
# ASCII Character Classes
# =============================================================================

def is_ascii_upper(char: str) -> bool:
    """Check whether char is one of A-Z."""
    return "A" <= char <= "Z" and len(char) == 1


def is_ascii_lower(char: str) -> bool:
    """Check whether char is one of a-z."""
    return "a" <= char <= "z" and len(char) == 1


def is_ascii_letter(char: str) -> bool:
    """Check whether char is an ASCII letter."""
    return is_ascii_upper(char) or is_ascii_lower(char)


def is_ascii_digit(char: str) -> bool:
    """Check whether char is one of 0-9."""
    return "0" <= char <= "9" and len(char) == 1


# =============================================================================
# Sanitization
# =============================================================================

def sanitize_identifier(name: str, keep_digits: bool = True) -> str:
    """
    Remove every character that cannot appear in a rewritten identifier.

    Args:
        name: Raw identifier text
        keep_digits: When False, ASCII digits are removed as well

    Returns:
        String containing only ``[A-Za-z0-9_]`` (or ``[A-Za-z_]``)
    """
    pattern = _DISALLOWED_IDENTIFIER_RE if keep_digits else _DISALLOWED_CONSTANT_RE
    return pattern.sub("", name)


def is_degenerate(sanitized: str) -> bool:
    """Check whether a sanitized identifier carries no usable characters."""
    return not sanitized.strip("_")


def collapse_underscores(text: str) -> str:
    """Collapse runs of underscores into one and trim them from both ends."""
    return _UNDERSCORE_RUN_RE.sub("_", text).strip("_")
