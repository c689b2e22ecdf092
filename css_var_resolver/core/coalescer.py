"""
Batches several stylesheets into a single transform call.

Chunks without any variable syntax cannot change under the transform, so they
are swapped for a positional marker comment before parsing and put back
verbatim afterwards.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

from .css_tree import VAR_FUNC_TOKEN
from .errors import ChunkTransformError, CssParseError
from .logger import get_logger
from .settings import TransformOptions, coerce_options
from .transform import transform_vars

log = get_logger(__name__)

__all__ = [
    "chunk_marker",
    "is_inert",
    "coalesce_chunks",
    "restore_chunks",
    "transform_chunks",
]

_MARKER_TEMPLATE = "/*__CSSVARS-CHUNK-{index}__*/"
_MARKER_PATTERN = re.compile(r"/\*__CSSVARS-CHUNK-(\d+)__\*/")

# any custom property name following a :root selector
_ROOT_DEFINITION = re.compile(r":root\b.*?--", re.DOTALL)


def chunk_marker(index: int) -> str:
    return _MARKER_TEMPLATE.format(index=index)


def is_inert(css_text: str) -> bool:
    """True when ``css_text`` can contribute nothing to a transform.

    A chunk is inert when it has no ``var(`` and no ``--`` anywhere after a
    ``:root`` selector. The test errs towards parsing: a chunk it cannot rule
    out is always transformed.
    """
    if VAR_FUNC_TOKEN in css_text:
        return False
    return _ROOT_DEFINITION.search(css_text) is None


def coalesce_chunks(chunks: Sequence[str]) -> str:
    return "".join(
        chunk_marker(index) if is_inert(css) else css
        for index, css in enumerate(chunks)
    )


def restore_chunks(css_text: str, chunks: Sequence[str]) -> str:
    """Replace every chunk marker with the original text of its chunk."""

    def _original(match: re.Match) -> str:
        index = int(match.group(1))
        if index >= len(chunks):
            return match.group(0)
        return chunks[index]

    return _MARKER_PATTERN.sub(_original, css_text)


def transform_chunks(
    chunks: Iterable[str],
    options: Union[TransformOptions, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> str:
    """Transform several CSS sources with a single parse pass.

    If the combined text fails to parse, every chunk is transformed on its own
    to find the offenders and a :class:`ChunkTransformError` naming them is
    raised. When no chunk fails alone, the original parse error propagates.
    """
    chunks = list(chunks)
    settings = coerce_options(options, **kwargs)

    combined = coalesce_chunks(chunks)
    skipped = sum(1 for css in chunks if is_inert(css))
    log.info(
        "Transforming %s CSS chunk(s), %s skipped without variable syntax",
        len(chunks) - skipped,
        skipped,
    )

    try:
        css_text = transform_vars(combined, settings)
    except CssParseError as exc:
        log.debug("Combined parse failed, retrying chunks individually: %s", exc)
        failures = _isolate_failures(chunks, settings)
        if failures:
            raise ChunkTransformError(failures) from exc
        raise

    return restore_chunks(css_text, chunks)


def _isolate_failures(
    chunks: Sequence[str], settings: TransformOptions
) -> List[Tuple[int, CssParseError]]:
    failures: List[Tuple[int, CssParseError]] = []
    for index, css in enumerate(chunks):
        if is_inert(css):
            continue
        try:
            transform_vars(css, settings)
        except CssParseError as err:
            log.error("CSS chunk %s failed to parse: %s", index, err)
            failures.append((index, err))
    return failures
