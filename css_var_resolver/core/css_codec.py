"""
CSS text <-> rule tree conversion backed by tinycss2.

tinycss2 tokenizes and groups the stylesheet; this module maps its nodes onto
the rule tree in :mod:`css_tree` and renders the tree back to compact CSS.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

import tinycss2
import tinycss2.ast

from .balanced import split_top_level
from .css_tree import (
    Comment,
    ContainerRule,
    Declaration,
    DeclarationItem,
    FontFaceRule,
    Keyframe,
    KeyframesRule,
    Rule,
    StyleRule,
    Stylesheet,
    UnknownRule,
)
from .errors import CssParseError
from .logger import get_logger

log = get_logger(__name__)

__all__ = ["parse_css", "serialize_css"]

CONTAINER_AT_RULES = {
    "media",
    "supports",
    "document",
    "host",
    "container",
    "layer",
    "scope",
    "starting-style",
}

_VENDOR_PREFIX = re.compile(r"^(-[a-z]+-)?(.+)$")
_CONTEXT_RADIUS = 30


# -----------------------------
# Parsing
# -----------------------------


def parse_css(text: str) -> Stylesheet:
    """Parse CSS text into a :class:`Stylesheet`.

    Raises :class:`CssParseError` on the first structural error reported by
    tinycss2.
    """
    nodes = tinycss2.parse_stylesheet(text, skip_comments=False, skip_whitespace=True)
    rules = _convert_rules(nodes, text)
    log.debug("Parsed %s top-level rules", len(rules))
    return Stylesheet(rules=rules)


def _split_vendor(keyword: str) -> tuple[str, str]:
    match = _VENDOR_PREFIX.match(keyword)
    if not match:
        return "", keyword
    return match.group(1) or "", match.group(2)


def _raise_parse_error(node: tinycss2.ast.ParseError, source: str) -> None:
    line = getattr(node, "source_line", None)
    column = getattr(node, "source_column", None)
    raise CssParseError(
        node.message,
        line=line,
        column=column,
        context=_context_snippet(source, line, column),
    )


def _context_snippet(source: str, line: Optional[int], column: Optional[int]) -> str:
    if not line:
        return ""
    lines = source.splitlines()
    if line > len(lines):
        return ""
    text = lines[line - 1]
    col = max((column or 1) - 1, 0)
    start = max(col - _CONTEXT_RADIUS, 0)
    return text[start : col + _CONTEXT_RADIUS].strip()


def _selectors(prelude: Iterable[tinycss2.ast.Node]) -> List[str]:
    text = tinycss2.serialize(prelude).strip()
    return [part.strip() for part in split_top_level(text, ",") if part.strip()]


def _convert_rules(nodes: Iterable[tinycss2.ast.Node], source: str) -> List[Rule]:
    rules: List[Rule] = []
    for node in nodes:
        if node.type == "whitespace":
            continue
        if node.type == "error":
            _raise_parse_error(node, source)
        if node.type == "comment":
            rules.append(Comment(node.value))
        elif node.type == "qualified-rule":
            rules.append(
                StyleRule(
                    selectors=_selectors(node.prelude),
                    declarations=_convert_declarations(node.content, source),
                )
            )
        elif node.type == "at-rule":
            rules.append(_convert_at_rule(node, source))
    return rules


def _convert_at_rule(node: tinycss2.ast.AtRule, source: str) -> Rule:
    keyword = node.lower_at_keyword
    vendor, bare = _split_vendor(keyword)
    if node.content is None:
        return UnknownRule(node.serialize().strip())

    if bare == "keyframes":
        return KeyframesRule(
            name=tinycss2.serialize(node.prelude).strip(),
            keyframes=_convert_keyframes(node.content, source),
            vendor=vendor,
        )
    if keyword == "font-face":
        return FontFaceRule(declarations=_convert_declarations(node.content, source))
    if bare in CONTAINER_AT_RULES:
        nested = tinycss2.parse_rule_list(
            node.content, skip_comments=False, skip_whitespace=True
        )
        return ContainerRule(
            keyword=keyword,
            condition=tinycss2.serialize(node.prelude).strip(),
            rules=_convert_rules(nested, source),
        )
    return UnknownRule(node.serialize().strip())


def _convert_keyframes(
    content: List[tinycss2.ast.Node], source: str
) -> List[Keyframe | Comment]:
    steps: List[Keyframe | Comment] = []
    nodes = tinycss2.parse_rule_list(content, skip_comments=False, skip_whitespace=True)
    for node in nodes:
        if node.type == "error":
            _raise_parse_error(node, source)
        if node.type == "comment":
            steps.append(Comment(node.value))
        elif node.type == "qualified-rule":
            steps.append(
                Keyframe(
                    selectors=_selectors(node.prelude),
                    declarations=_convert_declarations(node.content, source),
                )
            )
        else:
            raise CssParseError(
                f"unexpected @{node.at_keyword} inside @keyframes",
                line=node.source_line,
                column=node.source_column,
                context=_context_snippet(source, node.source_line, node.source_column),
            )
    return steps


def _convert_declarations(
    content: Optional[List[tinycss2.ast.Node]], source: str
) -> List[DeclarationItem]:
    items: List[DeclarationItem] = []
    if not content:
        return items
    nodes = tinycss2.parse_blocks_contents(
        content, skip_comments=False, skip_whitespace=True
    )
    for node in nodes:
        if node.type == "error":
            _raise_parse_error(node, source)
        if node.type == "comment":
            items.append(Comment(node.value))
        elif node.type == "declaration":
            value = tinycss2.serialize(node.value).strip()
            if node.important:
                value = f"{value} !important"
            items.append(Declaration(property=node.name, value=value))
        else:
            # Nested rules inside a declaration block have no tree representation.
            raise CssParseError(
                "nested rules inside a declaration block are not supported",
                line=node.source_line,
                column=node.source_column,
                context=_context_snippet(source, node.source_line, node.source_column),
            )
    return items


# -----------------------------
# Serialization
# -----------------------------


def serialize_css(sheet: Stylesheet) -> str:
    """Render a :class:`Stylesheet` as compact CSS text."""
    return _serialize_rules(sheet.rules)


def _serialize_rules(rules: Iterable[Rule]) -> str:
    return "".join(_serialize_rule(rule) for rule in rules)


def _serialize_rule(rule: Rule) -> str:
    if isinstance(rule, Comment):
        return f"/*{rule.text}*/"
    if isinstance(rule, StyleRule):
        if not any(isinstance(item, Declaration) for item in rule.declarations):
            return ""
        return f"{','.join(rule.selectors)}{{{_serialize_declarations(rule.declarations)}}}"
    if isinstance(rule, ContainerRule):
        head = f"@{rule.keyword} {rule.condition}" if rule.condition else f"@{rule.keyword}"
        return f"{head}{{{_serialize_rules(rule.rules)}}}"
    if isinstance(rule, KeyframesRule):
        body = "".join(
            f"/*{step.text}*/"
            if isinstance(step, Comment)
            else f"{','.join(step.selectors)}{{{_serialize_declarations(step.declarations)}}}"
            for step in rule.keyframes
        )
        return f"@{rule.vendor}keyframes {rule.name}{{{body}}}"
    if isinstance(rule, FontFaceRule):
        return f"@font-face{{{_serialize_declarations(rule.declarations)}}}"
    if isinstance(rule, UnknownRule):
        return rule.raw
    raise TypeError(f"cannot serialize {type(rule).__name__}")


def _serialize_declarations(items: Iterable[DeclarationItem]) -> str:
    out: List[str] = []
    needs_separator = False
    for item in items:
        if isinstance(item, Comment):
            out.append(f"/*{item.text}*/")
            continue
        if needs_separator:
            out.append(";")
        out.append(f"{item.property}:{item.value}")
        needs_separator = True
    return "".join(out)
