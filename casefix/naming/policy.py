"""
Rewrite policy.

A ``RewritePolicy`` bundles the knobs that distinguish rewriting variants:
whether digits survive, how word starts are found, and which sentinel
name stands in for identifiers with no usable characters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..utils.constants import (
    CapitalizationStrategy,
    DEFAULT_CONSTANT_SENTINEL,
    DEFAULT_LOCAL_SENTINEL,
    DEFAULT_METHOD_SENTINEL,
    DEFAULT_OTHER_SENTINEL,
    DEFAULT_TYPE_SENTINEL,
    NamingStyle,
    SymbolKind,
)
from ..utils.config import get_config
from ..utils.exceptions import ConfigurationError
from .classifier import classify
from .symbols import SymbolDescriptor


@dataclass(frozen=True)
class SentinelNames:
    """One placeholder name per symbol kind."""

    type_name: str = DEFAULT_TYPE_SENTINEL
    method_name: str = DEFAULT_METHOD_SENTINEL
    local_name: str = DEFAULT_LOCAL_SENTINEL
    constant_name: str = DEFAULT_CONSTANT_SENTINEL
    other_name: str = DEFAULT_OTHER_SENTINEL

    def for_descriptor(self, descriptor: SymbolDescriptor) -> str:
        """Pick the sentinel matching a symbol's kind."""
        if descriptor.kind is SymbolKind.TYPE:
            return self.type_name
        if descriptor.kind is SymbolKind.METHOD:
            return self.method_name
        if descriptor.kind is SymbolKind.LOCAL:
            return self.local_name
        # Const fields get the constant sentinel even when private
        if descriptor.is_constant_field or (descriptor.kind is SymbolKind.FIELD and descriptor.is_const):
            return self.constant_name
        return self.other_name

    def validate(self) -> None:
        """
        Ensure every sentinel satisfies the style of the kind it replaces.

        Raises:
            ConfigurationError: If a sentinel would itself be non-compliant
        """
        expectations = (
            ("type_name", self.type_name, NamingStyle.UPPER_CAMEL_CASE),
            ("method_name", self.method_name, NamingStyle.UPPER_CAMEL_CASE),
            ("local_name", self.local_name, NamingStyle.LOWER_CAMEL_CASE),
            ("constant_name", self.constant_name, NamingStyle.SCREAMING_SNAKE_CASE),
        )
        for key, value, style in expectations:
            if not isinstance(value, str):
                raise ConfigurationError(f"Sentinel {value!r} is not a string", key=f"sentinels.{key}")
            if not classify(value, style):
                raise ConfigurationError(
                    f"Sentinel '{value}' does not follow {style.value}", key=f"sentinels.{key}"
                )
        if not isinstance(self.other_name, str) or not self.other_name.isidentifier():
            raise ConfigurationError(
                f"Sentinel '{self.other_name}' is not a valid identifier", key="sentinels.other_name"
            )


def parse_strategy(value: Any) -> CapitalizationStrategy:
    """
    Resolve a capitalization strategy from its value or enum name.

    Raises:
        ConfigurationError: If the value names no strategy
    """
    if isinstance(value, CapitalizationStrategy):
        return value
    text = str(value).strip().lower()
    for strategy in CapitalizationStrategy:
        if text in (strategy.value, strategy.name.lower()):
            return strategy
    choices = ", ".join(strategy.value for strategy in CapitalizationStrategy)
    raise ConfigurationError(f"Unknown strategy '{value}' (expected one of: {choices})", key="policy.strategy")


@dataclass(frozen=True)
class RewritePolicy:
    """Options controlling how non-compliant names are rewritten."""

    retain_digits: bool = True
    strategy: CapitalizationStrategy = CapitalizationStrategy.DIGIT_TRIGGERED
    sentinels: SentinelNames = field(default_factory=SentinelNames)

    @classmethod
    def from_config(cls, config: Any) -> "RewritePolicy":
        """
        Build a policy from a ``CasefixConfig``.

        Raises:
            ConfigurationError: If the strategy or a sentinel is invalid
        """
        sentinels = SentinelNames(
            type_name=config.sentinels.type_name,
            method_name=config.sentinels.method_name,
            local_name=config.sentinels.local_name,
            constant_name=config.sentinels.constant_name,
            other_name=config.sentinels.other_name,
        )
        sentinels.validate()
        return cls(
            retain_digits=config.policy.retain_digits,
            strategy=parse_strategy(config.policy.strategy),
            sentinels=sentinels,
        )


DEFAULT_POLICY = RewritePolicy()


def get_default_policy() -> RewritePolicy:
    """Build the policy described by the global configuration."""
    return RewritePolicy.from_config(get_config())


def resolve_policy(policy: Optional[RewritePolicy]) -> RewritePolicy:
    return policy if policy is not None else DEFAULT_POLICY
