"""
Identifier tokenizer.

Splits a sanitized identifier into word fragments at underscores and at
camel-case boundaries, keeping acronyms together (``HTTPServer`` becomes
``HTTP`` and ``Server``).
"""

from __future__ import annotations

from typing import List

from ..utils.string_utils import is_ascii_digit, is_ascii_letter, is_ascii_lower, is_ascii_upper


def _flush(buffer: List[str], fragments: List[str]) -> None:
    if buffer:
        fragments.append("".join(buffer))
        buffer.clear()


def _starts_new_word(sanitized: str, index: int) -> bool:
    """Check whether the uppercase letter at index begins a new fragment."""
    previous = sanitized[index - 1]
    if is_ascii_lower(previous):
        return True
    if is_ascii_upper(previous):
        following = sanitized[index + 1] if index + 1 < len(sanitized) else ""
        return is_ascii_lower(following)
    # Digits are transparent: a letter after a digit continues the fragment
    return False


def tokenize(sanitized: str, retain_digits: bool = True) -> List[str]:
    """
    Split a sanitized identifier into word fragments.

    Args:
        sanitized: Identifier containing only ``[A-Za-z0-9_]``
        retain_digits: Keep digits inside fragments instead of dropping them

    Returns:
        Fragments in source order; empty when the input has no letters or digits

    Examples:
        tokenize("my_variable") -> ["my", "variable"]
        tokenize("HTTPServer") -> ["HTTP", "Server"]
        tokenize("userName2id") -> ["user", "Name2id"]
    """
    fragments: List[str] = []
    buffer: List[str] = []

    for index, char in enumerate(sanitized):
        if is_ascii_digit(char):
            if retain_digits:
                buffer.append(char)
            continue

        if not is_ascii_letter(char):
            # Underscores (and anything sanitization missed) separate words
            _flush(buffer, fragments)
            continue

        if is_ascii_upper(char) and buffer and _starts_new_word(sanitized, index):
            _flush(buffer, fragments)
        buffer.append(char)

    _flush(buffer, fragments)
    return fragments
