from __future__ import annotations

import re

from .balanced import match_parens

__all__ = ["fix_nested_calc"]

_CALC_FUNC = re.compile(r"(?<![\w-])(?:-[a-z]+-)?calc\(", re.IGNORECASE)


def fix_nested_calc(value: str) -> str:
    """Turn ``calc()`` nested inside another ``calc()`` into a plain group.

    ``calc(1px + calc(2px * 2))`` -> ``calc(1px + (2px * 2))``
    """
    out = []
    position = 0
    while True:
        match = _CALC_FUNC.search(value, position)
        if match is None:
            break
        group = match_parens(value, match.end() - 1)
        out.append(value[position : group.start + 1])
        out.append(_CALC_FUNC.sub("(", group.body))
        if group.closed:
            out.append(")")
        position = group.end
    out.append(value[position:])
    return "".join(out)
