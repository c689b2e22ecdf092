from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from .errors import CssSourceError
from .logger import get_logger

log = get_logger(__name__)

__all__ = ["CssSource", "collect_css_sources"]


@dataclass(frozen=True)
class CssSource:
    """One stylesheet read from disk; each source becomes one chunk."""

    path: Path
    text: str


def _expand(path: Path) -> List[Path]:
    if path.is_dir():
        return sorted(p for p in path.rglob("*.css") if p.is_file())
    if path.is_file():
        return [path]
    raise CssSourceError(f"CSS source does not exist: {path}")


def collect_css_sources(paths: Iterable[Union[str, Path]]) -> List[CssSource]:
    """Read CSS files, expanding directories to their ``*.css`` files in sorted order."""
    sources: List[CssSource] = []
    for raw in paths:
        for path in _expand(Path(raw)):
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise CssSourceError(f"Cannot read CSS source {path}: {exc}") from exc
            sources.append(CssSource(path=path, text=text))
    log.info("Loaded %s CSS source(s)", len(sources))
    return sources
