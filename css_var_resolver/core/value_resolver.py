"""
Textual resolution of ``var()`` references inside a single property value.

    var(<name>[, <fallback>])

The fallback is everything after the first top-level comma. A defined name
always wins over its fallback, even when the defined value is empty. Values
substituted for a reference are resolved themselves, so chains such as
``--c: var(--b); --b: var(--a)`` unwind completely.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Tuple

from .balanced import match_parens, split_top_level
from .css_tree import VAR_FUNC_TOKEN
from .logger import get_logger

log = get_logger(__name__)

__all__ = ["WARNING_INTRO", "resolve_value"]

WARNING_INTRO = "CSS transform warning:"

Warn = Callable[[str], None]


def resolve_value(
    value: str,
    variables: Mapping[str, str],
    on_warning: Optional[Warn] = None,
) -> str:
    """Return ``value`` with every resolvable ``var()`` substituted.

    Anomalies are reported through ``on_warning`` (or the module logger) and
    never raise. References that cannot be resolved (empty, undefined without
    fallback, circular) keep their literal ``var(...)`` text.
    """
    warn = on_warning or log.warning
    return _resolve(value, variables, warn, ())


def _resolve(
    value: str,
    variables: Mapping[str, str],
    warn: Warn,
    chain: Tuple[str, ...],
) -> str:
    out = []
    position = 0
    while True:
        index = value.find(VAR_FUNC_TOKEN, position)
        if index == -1:
            break
        group = match_parens(value, index + len(VAR_FUNC_TOKEN) - 1)
        if not group.closed:
            warn(f'{WARNING_INTRO} missing closing ")" in the value "{value}"')
        out.append(value[position:index])
        substitution = _substitute(group.body, variables, warn, chain)
        out.append(value[index : group.end] if substitution is None else substitution)
        position = group.end
    out.append(value[position:])
    return "".join(out)


def _substitute(
    body: str,
    variables: Mapping[str, str],
    warn: Warn,
    chain: Tuple[str, ...],
) -> Optional[str]:
    if not body.strip():
        warn(f"{WARNING_INTRO} var() must contain a non-whitespace string")
        return None

    parts = split_top_level(body, ",", maxsplit=1)
    name = parts[0].strip()
    fallback = parts[1].lstrip() if len(parts) > 1 else None

    if name in chain:
        warn(f'{WARNING_INTRO} variable "{name}" is part of a circular reference')
        return None
    if name in variables:
        return _resolve(variables[name], variables, warn, chain + (name,))
    if fallback is not None:
        return _resolve(fallback, variables, warn, chain)

    warn(f'{WARNING_INTRO} variable "{name}" is undefined')
    return None
