from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from ...core.css_sources import collect_css_sources
from ...core.errors import CssVarResolverError
from ...core.logger import get_logger
from ...core.scan import scan_variables

log = get_logger(__name__)


def run(args: Namespace) -> int:
    try:
        sources = collect_css_sources(args.paths)
        report = scan_variables([source.text for source in sources])
    except CssVarResolverError as exc:
        log.error(str(exc))
        return 1

    payload = report.model_dump_json(indent=2 if args.pretty else None)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload, encoding="utf-8")
        log.info(f"Wrote variable report to {out_path}")
    else:
        sys.stdout.write(payload + "\n")
    return 0
