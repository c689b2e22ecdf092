from __future__ import annotations

import re
from typing import Dict, List, Mapping

from .css_tree import (
    ROOT_SELECTOR,
    VAR_PROP_PREFIX,
    Declaration,
    StyleRule,
    Stylesheet,
)
from .logger import get_logger

log = get_logger(__name__)

__all__ = ["normalize_variable_name", "collect_variables"]

_LEADING_DASHES = re.compile(r"^-+")


def normalize_variable_name(name: str) -> str:
    """Return ``name`` with exactly one leading ``--``."""
    return VAR_PROP_PREFIX + _LEADING_DASHES.sub("", name)


def collect_variables(
    sheet: Stylesheet,
    overrides: Mapping[str, str],
    *,
    preserve: bool = True,
) -> Dict[str, str]:
    """Build the name -> value map from top-level ``:root`` rules and ``overrides``.

    Only rules whose selector list is exactly ``:root`` count as a variable
    scope. When ``preserve`` is false the collected definitions are removed
    from their rules; when it is true and overrides exist, a new ``:root``
    rule holding them is appended to the sheet.
    """
    variables: Dict[str, str] = {}

    for rule in sheet.rules:
        if not isinstance(rule, StyleRule) or not rule.is_root:
            continue
        consumed: List[int] = []
        for index, item in enumerate(rule.declarations):
            if isinstance(item, Declaration) and item.is_definition:
                variables[item.property] = item.value
                consumed.append(index)
        if not preserve:
            for index in reversed(consumed):
                del rule.declarations[index]

    if overrides:
        override_rule = StyleRule(selectors=[ROOT_SELECTOR])
        for key, value in overrides.items():
            name = normalize_variable_name(key)
            variables[name] = value
            override_rule.declarations.append(Declaration(property=name, value=value))
        if preserve:
            sheet.rules.append(override_rule)

    log.debug("Collected %s CSS variables", len(variables))
    return variables
