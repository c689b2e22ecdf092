"""Tests for batching stylesheet chunks into one transform."""

import pytest

from css_var_resolver import transform_chunks, transform_vars
from css_var_resolver.core.coalescer import (
    chunk_marker,
    coalesce_chunks,
    is_inert,
    restore_chunks,
)
from css_var_resolver.core.errors import ChunkTransformError, CssParseError


@pytest.mark.parametrize(
    "css, inert",
    [
        ("a{color:red}", True),
        (".a{--x:1px}", True),
        (":root{--x:1px}", False),
        (":root {\n  color: red;\n  --x: 1px;\n}", False),
        (":root{color:red;margin:0;--x:1px}", False),
        (":root {\n  color: red;\n  margin: 0;\n  --x: 1px;\n}", False),
        (":root{color:red}", True),
        ("a{width:var(--x)}", False),
        ("a{width:var( --x )}", False),
    ],
)
def test_is_inert(css, inert):
    assert is_inert(css) is inert


def test_coalesce_replaces_inert_chunks_with_markers():
    chunks = ["a{color:red}", ":root{--x:1px}", "b{color:blue}"]
    assert coalesce_chunks(chunks) == f"{chunk_marker(0)}:root{{--x:1px}}{chunk_marker(2)}"


def test_restore_uses_original_text():
    chunks = ["a { color : red }"]
    assert restore_chunks(f"x{chunk_marker(0)}y", chunks) == "xa { color : red }y"


def test_restore_leaves_unknown_markers():
    assert restore_chunks(chunk_marker(5), ["a{}"]) == chunk_marker(5)


class TestTransformChunks:
    def test_inert_chunk_is_byte_identical(self):
        chunks = ["a{color:red}", ":root{--x:1px} b{w:var(--x)}"]
        out = transform_chunks(chunks)
        assert out == "a{color:red}:root{--x:1px}b{w:var(--x);w:1px}"

    def test_inert_chunk_survives_without_preserve(self):
        chunks = ["a  {  color : red  }\n", ":root{--x:1px} b{w:var(--x)}"]
        out = transform_chunks(chunks, preserve_originals=False)
        assert out == "a  {  color : red  }\nb{w:1px}"

    def test_definitions_shared_across_chunks(self):
        chunks = [":root{--x:1px}", "b{w:var(--x)}"]
        assert transform_chunks(chunks, preserve_originals=False) == "b{w:1px}"

    def test_late_root_definition_is_collected(self):
        chunks = [":root{color:red;margin:0;--x:1px}", "b{w:var(--x)}"]
        assert transform_chunks(chunks, preserve_originals=False) == "b{w:1px}"

    @pytest.mark.parametrize(
        "chunks",
        [
            [":root{color:red;margin:0;--x:1px}", "b{w:var(--x)}"],
            [":root {\n  color: red;\n  margin: 0;\n  --x: 1px;\n}", "b{w:var(--x)}"],
            [":root{--x:1px}", "a{w:var(--x)}", "b{h:var(--y, 2px)}"],
            ["b{w:var(--x)}", ":root{--x:calc(1px + 2px)}"],
        ],
    )
    @pytest.mark.parametrize("preserve", [True, False])
    def test_matches_single_transform(self, chunks, preserve):
        expected = transform_vars(
            "".join(chunks), preserve_originals=preserve, on_warning=lambda m: None
        )
        out = transform_chunks(chunks, preserve_originals=preserve, on_warning=lambda m: None)
        assert out == expected

    def test_failing_chunk_is_isolated(self):
        chunks = ["a{color:var(--x)}", "b{color:red}", ":root{--x:1px} c"]
        with pytest.raises(ChunkTransformError) as excinfo:
            transform_chunks(chunks, on_warning=lambda m: None)
        assert excinfo.value.indices == [2]
        assert isinstance(excinfo.value.__cause__, CssParseError)

    def test_empty_input(self):
        assert transform_chunks([]) == ""
