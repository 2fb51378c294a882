"""
Symbol descriptors and the symbol-kind to naming-style mapping.

The host analyzer describes each identifier with a ``SymbolDescriptor``:
a closed ``SymbolKind`` plus the modifier flags that matter for fields.
``style_for`` turns that into the expected ``NamingStyle`` or None when
the symbol is exempt from naming rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Dict

from ..utils.constants import NamingStyle, SymbolKind
from ..utils.exceptions import UnknownSymbolKindError


@dataclass(frozen=True)
class SymbolDescriptor:
    """Kind and modifiers of the symbol an identifier names."""

    kind: SymbolKind
    is_public: bool = False
    is_const: bool = False
    is_static: bool = False
    is_readonly: bool = False

    @property
    def is_constant_field(self) -> bool:
        """A public const field, or a static readonly field of any visibility."""
        if self.kind is not SymbolKind.FIELD:
            return False
        return (self.is_const and self.is_public) or (self.is_static and self.is_readonly)

    @classmethod
    def type_(cls) -> "SymbolDescriptor":
        return cls(SymbolKind.TYPE)

    @classmethod
    def method(cls) -> "SymbolDescriptor":
        return cls(SymbolKind.METHOD)

    @classmethod
    def local(cls) -> "SymbolDescriptor":
        return cls(SymbolKind.LOCAL)

    @classmethod
    def const_field(cls, public: bool = True) -> "SymbolDescriptor":
        return cls(SymbolKind.FIELD, is_public=public, is_const=True)

    @classmethod
    def static_readonly_field(cls, public: bool = False) -> "SymbolDescriptor":
        return cls(SymbolKind.FIELD, is_public=public, is_static=True, is_readonly=True)

    @classmethod
    def field(
        cls,
        public: bool = False,
        const: bool = False,
        static: bool = False,
        readonly: bool = False,
    ) -> "SymbolDescriptor":
        return cls(
            SymbolKind.FIELD,
            is_public=public,
            is_const=const,
            is_static=static,
            is_readonly=readonly,
        )

    @classmethod
    def other(cls) -> "SymbolDescriptor":
        return cls(SymbolKind.OTHER)


# Names accepted on the command line and in config files
_DESCRIPTOR_FACTORIES = {
    "type": SymbolDescriptor.type_,
    "class": SymbolDescriptor.type_,
    "method": SymbolDescriptor.method,
    "local": SymbolDescriptor.local,
    "const": SymbolDescriptor.const_field,
    "static-readonly": SymbolDescriptor.static_readonly_field,
    "field": SymbolDescriptor.field,
    "other": SymbolDescriptor.other,
}

KIND_NAMES = tuple(_DESCRIPTOR_FACTORIES)

_KIND_STYLES: Dict[SymbolKind, Optional[NamingStyle]] = {
    SymbolKind.TYPE: NamingStyle.UPPER_CAMEL_CASE,
    SymbolKind.METHOD: NamingStyle.UPPER_CAMEL_CASE,
    SymbolKind.LOCAL: NamingStyle.LOWER_CAMEL_CASE,
    SymbolKind.FIELD: NamingStyle.SCREAMING_SNAKE_CASE,
    SymbolKind.OTHER: None,
}


def style_for(descriptor: SymbolDescriptor) -> Optional[NamingStyle]:
    """
    Get the naming style a symbol must follow.

    Args:
        descriptor: Symbol kind and modifiers

    Returns:
        Expected style, or None when the symbol is exempt
    """
    if descriptor.kind is SymbolKind.FIELD and not descriptor.is_constant_field:
        return None
    return _KIND_STYLES[descriptor.kind]


def descriptor_from_name(name: str, public: Optional[bool] = None) -> SymbolDescriptor:
    """
    Build a descriptor from a user-facing kind name such as ``local``.

    When ``public`` is None the factory default visibility applies: ``const``
    is public, ``static-readonly`` and ``field`` are private.

    Raises:
        UnknownSymbolKindError: If the name is not recognized
    """
    key = name.strip().lower().replace("_", "-")
    factory = _DESCRIPTOR_FACTORIES.get(key)
    if factory is None:
        raise UnknownSymbolKindError(name, KIND_NAMES)
    if public is not None and key in ("const", "static-readonly", "field"):
        return factory(public=public)
    return factory()


def style_from_name(name: str) -> NamingStyle:
    """
    Resolve a naming style from its enum name or display value.

    Raises:
        UnknownSymbolKindError: If no style matches
    """
    wanted = name.strip()
    for style in NamingStyle:
        if wanted in (style.value, style.name) or wanted.lower() == style.name.lower():
            return style
    raise UnknownSymbolKindError(name, [style.value for style in NamingStyle])
