"""
Custom property resolution pass.

Parses the CSS once, optionally prunes everything unrelated to variables,
collects the ``:root`` definitions (plus overrides) into a map, and then
rewrites every declaration whose value uses ``var()``. The map is complete
before any value is resolved, so references may precede their definitions.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Union

from .calc import fix_nested_calc
from .css_codec import parse_css, serialize_css
from .css_tree import VAR_FUNC_TOKEN, Declaration, DeclarationItem
from .logger import get_logger
from .rule_filter import filter_vars
from .settings import TransformOptions, coerce_options
from .value_resolver import resolve_value
from .variables import collect_variables
from .walker import DeclarationOwner, walk_css

log = get_logger(__name__)

__all__ = ["transform_vars"]


def transform_vars(
    css_text: str,
    options: Union[TransformOptions, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> str:
    """Resolve CSS custom properties in ``css_text`` to static values.

    Args:
        css_text: CSS containing variable definitions and ``var()`` functions
        options: :class:`TransformOptions` or a mapping of its fields;
                 keyword arguments override individual fields

    Returns:
        Serialized CSS with references resolved

    Raises:
        CssParseError: if ``css_text`` is structurally invalid
    """
    settings = coerce_options(options, **kwargs)

    sheet = parse_css(css_text)

    if settings.only_variables:
        sheet.rules = filter_vars(sheet.rules)

    variables = collect_variables(
        sheet,
        settings.override_variables,
        preserve=settings.preserve_originals,
    )

    resolved_count = 0

    def resolve_declarations(
        declarations: List[DeclarationItem], owner: DeclarationOwner
    ) -> None:
        nonlocal resolved_count
        i = 0
        while i < len(declarations):
            decl = declarations[i]
            i += 1
            if not isinstance(decl, Declaration):
                continue
            if VAR_FUNC_TOKEN not in decl.value:
                continue

            resolved = resolve_value(decl.value, variables, settings.on_warning)
            if resolved == decl.value:
                continue
            if settings.fix_nested_calc:
                resolved = fix_nested_calc(resolved)

            resolved_count += 1
            if settings.preserve_originals:
                declarations.insert(i, Declaration(property=decl.property, value=resolved))
                # step over the inserted copy
                i += 1
            else:
                decl.value = resolved

    walk_css(sheet, resolve_declarations)
    log.debug(
        "Resolved %s declarations using %s variables", resolved_count, len(variables)
    )

    return serialize_css(sheet)
