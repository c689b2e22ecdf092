from __future__ import annotations

from dataclasses import dataclass
from typing import List

__all__ = ["BalancedMatch", "match_parens", "split_top_level"]


@dataclass(frozen=True)
class BalancedMatch:
    """Parenthesised group located inside a larger string.

    ``start`` is the index of the opening ``(``; ``end`` is the index just past
    the closing ``)``, or ``len(text)`` when the group is never closed.
    """

    start: int
    end: int
    body: str
    closed: bool


def match_parens(text: str, open_index: int) -> BalancedMatch:
    """Match the ``(`` at ``open_index`` against its closing ``)``.

    Unbalanced groups extend to the end of ``text`` with ``closed=False``.
    """
    if text[open_index] != "(":
        raise ValueError(f"expected '(' at index {open_index} of {text!r}")
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return BalancedMatch(
                    start=open_index,
                    end=index + 1,
                    body=text[open_index + 1 : index],
                    closed=True,
                )
    return BalancedMatch(
        start=open_index,
        end=len(text),
        body=text[open_index + 1 :],
        closed=False,
    )


def split_top_level(text: str, separator: str = ",", maxsplit: int = -1) -> List[str]:
    """Split on ``separator`` outside of (), [] and quoted strings."""
    parts: List[str] = []
    depth = 0
    quote = ""
    current: List[str] = []
    for char in text:
        if quote:
            current.append(char)
            if char == quote:
                quote = ""
            continue
        if char in "\"'":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(0, depth - 1)
        elif char == separator and depth == 0 and maxsplit != 0:
            parts.append("".join(current))
            current = []
            maxsplit -= 1
            continue
        current.append(char)
    parts.append("".join(current))
    return parts
