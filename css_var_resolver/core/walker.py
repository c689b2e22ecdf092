from __future__ import annotations

from typing import Callable, List, Sequence, Union

from .css_tree import (
    ContainerRule,
    DeclarationItem,
    FontFaceRule,
    Keyframe,
    KeyframesRule,
    Rule,
    StyleRule,
    Stylesheet,
)

__all__ = ["DeclarationOwner", "Visitor", "walk_css"]

DeclarationOwner = Union[StyleRule, Keyframe, FontFaceRule]
Visitor = Callable[[List[DeclarationItem], DeclarationOwner], None]


def walk_css(tree: Union[Stylesheet, Sequence[Rule]], visitor: Visitor) -> None:
    """Call ``visitor(declarations, owner)`` for every declaration list in ``tree``.

    Container rules are walked recursively and every keyframe step is visited.
    The visitor receives the live list and may insert or remove entries.
    """
    rules = tree.rules if isinstance(tree, Stylesheet) else tree
    for rule in rules:
        if isinstance(rule, ContainerRule):
            walk_css(rule.rules, visitor)
        elif isinstance(rule, KeyframesRule):
            for step in rule.keyframes:
                if isinstance(step, Keyframe):
                    visitor(step.declarations, step)
        elif isinstance(rule, (StyleRule, FontFaceRule)):
            visitor(rule.declarations, rule)
