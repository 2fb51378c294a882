"""
Naming style classifier.

Checks raw identifiers against the three supported conventions. The
patterns are compiled once into a ``StylePatterns`` table; a name with any
character outside the pattern alphabet simply fails to match.

Consecutive capitals are rejected in both camel styles, so acronym names
such as ``HTTPServer`` are reported as non-compliant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional

from ..utils.constants import NamingStyle, STYLE_PATTERN_SOURCES
from .symbols import SymbolDescriptor, style_for


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of checking one identifier."""

    compliant: bool
    style: Optional[NamingStyle]

    def __bool__(self) -> bool:
        return self.compliant


class StylePatterns:
    """Compiled full-match patterns, one per naming style."""

    def __init__(self, sources: Optional[Dict[NamingStyle, str]] = None):
        sources = sources or STYLE_PATTERN_SOURCES
        self._patterns: Dict[NamingStyle, "re.Pattern[str]"] = {
            style: re.compile(source) for style, source in sources.items()
        }

    def matches(self, name: str, style: NamingStyle) -> bool:
        return self._patterns[style].fullmatch(name) is not None


DEFAULT_PATTERNS = StylePatterns()


def classify(name: str, style: NamingStyle, patterns: Optional[StylePatterns] = None) -> bool:
    """
    Check whether a raw identifier follows a naming style.

    Args:
        name: Identifier exactly as written in source
        style: Convention to check against
        patterns: Compiled pattern table, defaults to the shared one

    Returns:
        True if the whole name matches the style
    """
    return (patterns or DEFAULT_PATTERNS).matches(name, style)


def classify_symbol(
    name: str, descriptor: SymbolDescriptor, patterns: Optional[StylePatterns] = None
) -> ClassificationResult:
    """
    Check an identifier against the style its symbol kind requires.

    Exempt symbols are always compliant and carry no style.
    """
    style = style_for(descriptor)
    if style is None:
        return ClassificationResult(compliant=True, style=None)
    return ClassificationResult(compliant=classify(name, style, patterns), style=style)


def is_compliant(name: str, descriptor: SymbolDescriptor) -> bool:
    """Shorthand for ``classify_symbol(name, descriptor).compliant``."""
    return classify_symbol(name, descriptor).compliant
