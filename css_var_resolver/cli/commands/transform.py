"""
Transform Command

Resolves CSS custom properties in one or more stylesheets and writes the
static result to a file or stdout.
"""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import Dict, List, Optional

from ...core.coalescer import transform_chunks
from ...core.css_sources import collect_css_sources
from ...core.errors import ConfigError, CssVarResolverError
from ...core.logger import get_logger, set_silent
from ...core.settings import ResolverConfig, ResolverConfigModel

log = get_logger(__name__)


def parse_var_assignments(assignments: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``NAME=VALUE`` strings into an override mapping."""
    variables: Dict[str, str] = {}
    for item in assignments or []:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise ConfigError(f"Expected NAME=VALUE for --var, got {item!r}")
        variables[name.strip()] = value.strip()
    return variables


def load_config(args: Namespace) -> ResolverConfigModel:
    config_path = getattr(args, "config", None)
    model = (
        ResolverConfig(Path(config_path)).load() if config_path else ResolverConfigModel()
    )
    if getattr(args, "keep_all", False):
        model.only_variables = False
    if getattr(args, "no_preserve", False):
        model.preserve_originals = False
    if getattr(args, "no_fix_calc", False):
        model.fix_nested_calc = False
    if getattr(args, "silent", False):
        model.silent = True
    model.override_variables.update(parse_var_assignments(getattr(args, "var", None)))
    return model


def run(args: Namespace) -> int:
    try:
        config = load_config(args)
        if config.silent:
            set_silent(True)
        paths = list(args.paths) or list(config.sources)
        if not paths:
            raise ConfigError("No CSS sources given (pass paths or set 'sources' in the config)")
        sources = collect_css_sources(paths)
        css_text = transform_chunks([source.text for source in sources], config.to_options())
    except CssVarResolverError as exc:
        log.error(str(exc))
        return 1

    out = getattr(args, "out", None)
    if out:
        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(css_text, encoding="utf-8")
        log.info(f"Wrote resolved CSS to {out_path}")
    else:
        sys.stdout.write(css_text)
        sys.stdout.write("\n")
    return 0
