from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .commands import scan as cmd_scan
from .commands import transform as cmd_transform
from ..core.logger import configure_logging


def entrypoint():
    configure_logging()
    sys.exit(main())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve CSS custom properties into static values"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    t = sub.add_parser("transform", help="Resolve var() references in CSS files")
    t.add_argument(
        "paths", nargs="*", help="CSS files or directories (directories are searched for *.css)"
    )
    t.add_argument("--out", type=str, default=None, help="Output file (defaults to stdout)")
    t.add_argument("--config", type=str, default=None, help="JSON config file")
    t.add_argument(
        "--keep-all",
        action="store_true",
        help="Keep rules and declarations that do not involve CSS variables",
    )
    t.add_argument(
        "--no-preserve",
        action="store_true",
        help="Drop variable definitions and replace var() declarations in place",
    )
    t.add_argument(
        "--no-fix-calc",
        action="store_true",
        help="Leave calc() nested inside calc() untouched",
    )
    t.add_argument(
        "--var",
        action="append",
        default=None,
        metavar="NAME=VALUE",
        help="Override a variable (repeatable; leading -- optional)",
    )
    t.add_argument("--silent", action="store_true", help="Only log errors")

    s = sub.add_parser("scan", help="Report variable definitions and references")
    s.add_argument("paths", nargs="+", help="CSS files or directories")
    s.add_argument("--out", type=str, default=None, help="Output JSON file (defaults to stdout)")
    s.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "transform":
        return cmd_transform.run(args)
    elif args.command == "scan":
        return cmd_scan.run(args)
    return 2


if __name__ == "__main__":
    entrypoint()
