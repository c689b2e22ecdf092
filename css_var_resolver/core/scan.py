"""
Variable usage report for a set of stylesheets.

Lists the :root definitions, every name referenced through ``var()``, and the
names referenced but never defined.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence, Set

from pydantic import BaseModel, Field

from .css_codec import parse_css
from .css_tree import Declaration, DeclarationItem
from .logger import get_logger
from .variables import collect_variables
from .walker import DeclarationOwner, walk_css

log = get_logger(__name__)

__all__ = ["VariableReport", "scan_variables"]

VAR_REFERENCE_PATTERN = re.compile(r"var\(\s*(--[\w-]+)")


class VariableReport(BaseModel):
    variables: Dict[str, str] = Field(
        default_factory=dict, description="Root-scope definitions, later ones win"
    )
    references: List[str] = Field(
        default_factory=list, description="Names used in var(), sorted"
    )
    undefined: List[str] = Field(
        default_factory=list, description="Referenced names with no definition"
    )


def scan_variables(chunks: Sequence[str]) -> VariableReport:
    """Parse ``chunks`` as one stylesheet and report variable usage."""
    sheet = parse_css("".join(chunks))
    variables = collect_variables(sheet, {}, preserve=True)

    referenced: Set[str] = set()

    def visit(declarations: List[DeclarationItem], owner: DeclarationOwner) -> None:
        for decl in declarations:
            if isinstance(decl, Declaration):
                referenced.update(VAR_REFERENCE_PATTERN.findall(decl.value))

    walk_css(sheet, visit)
    undefined = sorted(name for name in referenced if name not in variables)
    if undefined:
        log.info("Found %s undefined variable reference(s)", len(undefined))
    return VariableReport(
        variables=variables,
        references=sorted(referenced),
        undefined=undefined,
    )
