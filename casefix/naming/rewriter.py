"""
Name rewriter.

Turns a non-compliant identifier into one that follows the style its
symbol kind requires. Rewriting is total: input with no usable characters
falls back to a per-kind sentinel name, and every result (sentinels
included) satisfies the classifier for its target style.

Two capitalization strategies are supported:

- DIGIT_TRIGGERED (default) walks the sanitized name character by
  character, preserving case except that a letter after a digit or an
  underscore is capitalized and acronym runs are folded to one capital.
- WORD_SPLIT tokenizes the name and title-cases each fragment.
"""

from __future__ import annotations

from typing import List, Optional

from ..utils.constants import CapitalizationStrategy, NamingStyle
from ..utils.logging import CasefixLogger
from ..utils.string_utils import (
    collapse_underscores,
    is_ascii_digit,
    is_ascii_letter,
    is_ascii_lower,
    is_ascii_upper,
    is_degenerate,
    sanitize_identifier,
)
from .classifier import classify
from .policy import RewritePolicy, resolve_policy
from .symbols import SymbolDescriptor, style_for
from .tokenizer import tokenize

_log = CasefixLogger(__name__)


# =============================================================================
# Camel-case Transforms
# =============================================================================

def _first_letter_index(text: str) -> int:
    for index, char in enumerate(text):
        if is_ascii_letter(char):
            return index
    return -1


def _fold_capital(out: List[str], candidate: str) -> str:
    """Lowercase a capital that would directly follow another capital."""
    if is_ascii_upper(candidate) and out and is_ascii_upper(out[-1]):
        return candidate.lower()
    return candidate


def _camel_digit_triggered(sanitized: str, upper_first: bool) -> str:
    start = _first_letter_index(sanitized)
    if start < 0:
        return ""

    out: List[str] = []
    capitalize_next = False
    for index in range(start, len(sanitized)):
        char = sanitized[index]
        if char == "_":
            capitalize_next = True
            continue
        if is_ascii_digit(char):
            out.append(char)
            capitalize_next = True
            continue

        if not out:
            candidate = char.upper() if upper_first else char.lower()
        elif capitalize_next:
            candidate = char.upper()
        elif is_ascii_upper(char) and is_ascii_upper(sanitized[index - 1]):
            # Inside an acronym; only the capital that opens the next word survives
            following = sanitized[index + 1] if index + 1 < len(sanitized) else ""
            candidate = char if is_ascii_lower(following) else char.lower()
        else:
            candidate = char

        out.append(_fold_capital(out, candidate))
        capitalize_next = False

    return "".join(out)


def _title_fragment(fragment: str, capitalize_first: bool) -> str:
    chars: List[str] = []
    after_digit = False
    for index, char in enumerate(fragment):
        if is_ascii_digit(char):
            chars.append(char)
            after_digit = True
            continue
        if after_digit or (index == 0 and capitalize_first):
            chars.append(char.upper())
        else:
            chars.append(char.lower())
        after_digit = False
    return "".join(chars)


def _camel_word_split(sanitized: str, upper_first: bool, retain_digits: bool) -> str:
    words: List[str] = []
    for fragment in tokenize(sanitized, retain_digits=retain_digits):
        if not words:
            # An identifier cannot open with a digit
            fragment = fragment.lstrip("0123456789")
            if not fragment:
                continue
            words.append(_title_fragment(fragment, capitalize_first=upper_first))
        else:
            words.append(_title_fragment(fragment, capitalize_first=True))

    out: List[str] = []
    for char in "".join(words):
        out.append(_fold_capital(out, char))
    return "".join(out)


# =============================================================================
# Constant Transform
# =============================================================================

def _screaming_snake(sanitized: str, strategy: CapitalizationStrategy) -> str:
    if strategy is CapitalizationStrategy.WORD_SPLIT:
        return "_".join(fragment.upper() for fragment in tokenize(sanitized, retain_digits=False))
    return collapse_underscores(sanitized).upper()


# =============================================================================
# Public API
# =============================================================================

def transform(sanitized: str, style: NamingStyle, policy: Optional[RewritePolicy] = None) -> str:
    """
    Apply a style transform to an already sanitized identifier.

    Returns an empty string when nothing usable remains; callers substitute
    a sentinel in that case.
    """
    policy = resolve_policy(policy)

    if style is NamingStyle.SCREAMING_SNAKE_CASE:
        return _screaming_snake(sanitize_identifier(sanitized, keep_digits=False), policy.strategy)

    upper_first = style is NamingStyle.UPPER_CAMEL_CASE
    if not policy.retain_digits:
        sanitized = sanitize_identifier(sanitized, keep_digits=False)
    if policy.strategy is CapitalizationStrategy.WORD_SPLIT:
        return _camel_word_split(sanitized, upper_first, policy.retain_digits)
    return _camel_digit_triggered(sanitized, upper_first)


def rewrite(name: str, descriptor: SymbolDescriptor, policy: Optional[RewritePolicy] = None) -> str:
    """
    Produce a name for a symbol that follows its naming convention.

    Args:
        name: Identifier exactly as written in source
        descriptor: Kind and modifiers of the symbol
        policy: Rewrite options, defaults to digit-triggered with digits kept

    Returns:
        ``name`` itself when already compliant, otherwise a compliant
        replacement or the kind's sentinel name

    Examples:
        rewrite("my_variable", SymbolDescriptor.local()) -> "myVariable"
        rewrite("userName2id", SymbolDescriptor.method()) -> "UserName2Id"
        rewrite("", SymbolDescriptor.type_()) -> "FixMeClass"
    """
    policy = resolve_policy(policy)
    style = style_for(descriptor)

    if style is not None and classify(name, style):
        return name

    keep_digits = policy.retain_digits and style is not NamingStyle.SCREAMING_SNAKE_CASE
    sanitized = sanitize_identifier(name, keep_digits=keep_digits)
    sentinel = policy.sentinels.for_descriptor(descriptor)

    if is_degenerate(sanitized):
        _log.log_sentinel(name, sentinel)
        return sentinel

    if style is None:
        return sanitized

    rewritten = transform(sanitized, style, policy)
    if not rewritten:
        _log.log_sentinel(name, sentinel)
        return sentinel

    _log.log_violation(name, style.value, rewritten)
    return rewritten


def suggest(name: str, descriptor: SymbolDescriptor, policy: Optional[RewritePolicy] = None) -> Optional[str]:
    """Return a replacement name, or None when ``name`` is already compliant."""
    style = style_for(descriptor)
    if style is None or classify(name, style):
        return None
    return rewrite(name, descriptor, policy)
