"""
Rule tree produced by the CSS codec.

The engine owns a tree for the duration of a single transform call and
mutates declaration lists in place. Node kinds:

- StyleRule: selectors + declarations (``a, b { ... }``)
- ContainerRule: conditional group with nested rules (``@media``, ``@supports``)
- KeyframesRule: named list of Keyframe steps
- FontFaceRule: descriptor declarations (``@font-face``)
- Comment: opaque ``/* ... */`` text
- UnknownRule: any other at-rule, kept as raw source text
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

__all__ = [
    "VAR_PROP_PREFIX",
    "VAR_FUNC_TOKEN",
    "ROOT_SELECTOR",
    "Declaration",
    "Comment",
    "StyleRule",
    "ContainerRule",
    "Keyframe",
    "KeyframesRule",
    "FontFaceRule",
    "UnknownRule",
    "Stylesheet",
    "Rule",
    "DeclarationItem",
    "is_definition",
    "is_reference",
    "is_variable_related",
]

VAR_PROP_PREFIX = "--"
VAR_FUNC_TOKEN = "var("
ROOT_SELECTOR = ":root"


@dataclass
class Declaration:
    property: str
    value: str

    @property
    def is_definition(self) -> bool:
        return self.property.startswith(VAR_PROP_PREFIX)

    @property
    def is_reference(self) -> bool:
        return VAR_FUNC_TOKEN in self.value


@dataclass
class Comment:
    text: str


DeclarationItem = Union[Declaration, Comment]


@dataclass
class StyleRule:
    selectors: List[str]
    declarations: List[DeclarationItem] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return len(self.selectors) == 1 and self.selectors[0] == ROOT_SELECTOR


@dataclass
class ContainerRule:
    """Conditional group rule; ``keyword`` is the at-keyword without ``@``."""

    keyword: str
    condition: str
    rules: List["Rule"] = field(default_factory=list)


@dataclass
class Keyframe:
    selectors: List[str]
    declarations: List[DeclarationItem] = field(default_factory=list)


@dataclass
class KeyframesRule:
    name: str
    keyframes: List[Union[Keyframe, Comment]] = field(default_factory=list)
    vendor: str = ""


@dataclass
class FontFaceRule:
    declarations: List[DeclarationItem] = field(default_factory=list)


@dataclass
class UnknownRule:
    raw: str


Rule = Union[StyleRule, ContainerRule, KeyframesRule, FontFaceRule, Comment, UnknownRule]


@dataclass
class Stylesheet:
    rules: List[Rule] = field(default_factory=list)


def is_definition(item: DeclarationItem) -> bool:
    return isinstance(item, Declaration) and item.is_definition


def is_reference(item: DeclarationItem) -> bool:
    return isinstance(item, Declaration) and item.is_reference


def is_variable_related(item: DeclarationItem) -> bool:
    """True for custom-property definitions and values using ``var()``."""
    return is_definition(item) or is_reference(item)
