"""
Prunes a rule tree down to the parts that involve custom properties.

@font-face and @keyframes rules are kept whole when any of their declarations
is variable-related, since their declarations only make sense together.
"""

from __future__ import annotations

from typing import List

from .css_tree import (
    Comment,
    ContainerRule,
    FontFaceRule,
    Keyframe,
    KeyframesRule,
    Rule,
    StyleRule,
    is_variable_related,
)

__all__ = ["filter_vars"]


def filter_vars(rules: List[Rule]) -> List[Rule]:
    """Return the rules that define or reference custom properties.

    Style rules keep only their variable-related declarations and are dropped
    once none remain. Containers are kept while any nested rule survives.
    Comments and unrecognised at-rules pass through untouched.
    """
    kept: List[Rule] = []
    for rule in rules:
        if isinstance(rule, StyleRule):
            declarations = [d for d in rule.declarations if is_variable_related(d)]
            if declarations:
                rule.declarations = declarations
                kept.append(rule)
        elif isinstance(rule, FontFaceRule):
            if any(is_variable_related(d) for d in rule.declarations):
                kept.append(rule)
        elif isinstance(rule, KeyframesRule):
            if any(
                is_variable_related(d)
                for step in rule.keyframes
                if isinstance(step, Keyframe)
                for d in step.declarations
            ):
                kept.append(rule)
        elif isinstance(rule, ContainerRule):
            rule.rules = filter_vars(rule.rules)
            # A container holding nothing but comments is empty.
            if any(not isinstance(nested, Comment) for nested in rule.rules):
                kept.append(rule)
        else:
            kept.append(rule)
    return kept
