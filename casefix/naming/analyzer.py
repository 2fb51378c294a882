"""
Naming analyzer.

Batch front end over the classifier and rewriter: checks many
(identifier, descriptor) pairs and reports each non-compliant one as a
``NamingViolation`` carrying a diagnostic id, a message and the suggested
replacement. Locating or renaming symbols in source is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..utils.config import CasefixConfig, get_config
from ..utils.constants import DIAGNOSTIC_CATEGORY, NamingStyle
from ..utils.logging import CasefixLogger
from .classifier import StylePatterns, classify_symbol
from .policy import RewritePolicy
from .rewriter import rewrite
from .symbols import SymbolDescriptor


@dataclass(frozen=True)
class NamingViolation:
    """A single identifier that does not follow its naming convention."""

    name: str
    descriptor: SymbolDescriptor
    style: NamingStyle
    suggestion: str
    diagnostic_id: str
    message: str
    category: str = DIAGNOSTIC_CATEGORY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.diagnostic_id,
            "category": self.category,
            "name": self.name,
            "kind": self.descriptor.kind.value,
            "style": self.style.value,
            "suggestion": self.suggestion,
            "message": self.message,
        }


class NamingAnalyzer:
    """
    Checks identifiers and proposes compliant replacements.

    The policy and diagnostic settings are taken from the supplied
    configuration (or the global one) once, at construction time.
    """

    def __init__(
        self,
        policy: Optional[RewritePolicy] = None,
        config: Optional[CasefixConfig] = None,
        patterns: Optional[StylePatterns] = None,
    ):
        self.config = config or get_config()
        self.policy = policy or RewritePolicy.from_config(self.config)
        self.patterns = patterns
        self._log = CasefixLogger(__name__)

    def check(self, name: str, descriptor: SymbolDescriptor) -> Optional[NamingViolation]:
        """
        Check one identifier.

        Args:
            name: Identifier as written in source
            descriptor: Kind and modifiers of the symbol

        Returns:
            A violation record, or None when the name is compliant or exempt
        """
        result = classify_symbol(name, descriptor, self.patterns)
        if result.compliant:
            return None

        suggestion = rewrite(name, descriptor, self.policy)
        message = self.config.analyzer.message_format.format(
            name=name, style=result.style.value, suggestion=suggestion
        )
        return NamingViolation(
            name=name,
            descriptor=descriptor,
            style=result.style,
            suggestion=suggestion,
            diagnostic_id=self.config.analyzer.diagnostic_id,
            message=message,
        )

    def analyze(self, symbols: Iterable[Tuple[str, SymbolDescriptor]]) -> List[NamingViolation]:
        """
        Check a sequence of identifiers, preserving their order.

        Args:
            symbols: ``(name, descriptor)`` pairs

        Returns:
            Violations for the non-compliant identifiers only
        """
        checked = 0
        violations: List[NamingViolation] = []
        for name, descriptor in symbols:
            checked += 1
            violation = self.check(name, descriptor)
            if violation is not None:
                violations.append(violation)

        self._log.log_analysis_summary(checked, len(violations))
        return violations
