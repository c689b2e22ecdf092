"""Tests for pruning rules unrelated to CSS variables."""

from css_var_resolver.core.css_codec import parse_css, serialize_css
from css_var_resolver.core.rule_filter import filter_vars


def _filtered(css: str) -> str:
    sheet = parse_css(css)
    sheet.rules = filter_vars(sheet.rules)
    return serialize_css(sheet)


class TestFilterVars:
    def test_keeps_only_variable_declarations(self):
        assert _filtered("a{color:red;--x:1px;width:var(--x)}") == "a{--x:1px;width:var(--x)}"

    def test_drops_rules_without_variables(self):
        assert _filtered("a{color:red}b{width:var(--x)}") == "b{width:var(--x)}"

    def test_reference_anywhere_in_value_counts(self):
        assert _filtered("a{border:1px solid var(--c)}") == "a{border:1px solid var(--c)}"

    def test_font_face_kept_whole(self):
        css = "@font-face{font-family:X;src:var(--src);font-weight:400}"
        assert _filtered(css) == css

    def test_font_face_without_variables_dropped(self):
        assert _filtered("@font-face{font-family:X}") == ""

    def test_keyframes_kept_whole(self):
        css = "@keyframes k{from{opacity:var(--o)}to{opacity:1}}"
        assert _filtered(css) == css

    def test_keyframes_without_variables_dropped(self):
        assert _filtered("@keyframes k{from{opacity:0}to{opacity:1}}") == ""

    def test_container_recurses(self):
        css = "@media print{a{color:red}b{color:var(--c);margin:0}}"
        assert _filtered(css) == "@media print{b{color:var(--c)}}"

    def test_empty_container_dropped(self):
        assert _filtered("@media print{a{color:red}/* c */}") == ""

    def test_comments_and_unknown_rules_pass_through(self):
        css = "/* keep */@import url(a.css);"
        assert _filtered(css) == css

    def test_everything_filtered_is_empty_sheet(self):
        assert _filtered("a{color:red}@media print{b{margin:0}}") == ""
