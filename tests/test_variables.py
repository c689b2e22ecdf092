"""Tests for collecting :root variable definitions."""

import pytest

from css_var_resolver.core.css_codec import parse_css, serialize_css
from css_var_resolver.core.variables import collect_variables, normalize_variable_name


@pytest.mark.parametrize(
    "raw, expected",
    [("x", "--x"), ("--x", "--x"), ("---x", "--x"), ("-x-y", "--x-y")],
)
def test_normalize_variable_name(raw, expected):
    assert normalize_variable_name(raw) == expected


class TestCollectVariables:
    def test_collects_root_definitions_in_order(self):
        sheet = parse_css(":root{--a:1px;--b:2px;--a:3px}")
        variables = collect_variables(sheet, {})
        assert variables == {"--a": "3px", "--b": "2px"}

    def test_ignores_non_root_scopes(self):
        sheet = parse_css(
            ".x{--a:1px}"
            ":root,html{--b:2px}"
            "@media print{:root{--c:3px}}"
            ":root{--d:4px}"
        )
        assert collect_variables(sheet, {}) == {"--d": "4px"}

    def test_preserve_keeps_definitions(self):
        sheet = parse_css(":root{--a:1px;color:red}")
        collect_variables(sheet, {}, preserve=True)
        assert serialize_css(sheet) == ":root{--a:1px;color:red}"

    def test_without_preserve_removes_definitions(self):
        sheet = parse_css(":root{--a:1px;color:red;--b:2px}")
        variables = collect_variables(sheet, {}, preserve=False)
        assert variables == {"--a": "1px", "--b": "2px"}
        assert serialize_css(sheet) == ":root{color:red}"

    def test_overrides_win_and_are_normalized(self):
        sheet = parse_css(":root{--x:1px}")
        variables = collect_variables(sheet, {"x": "2px", "---y": "3px"})
        assert variables == {"--x": "2px", "--y": "3px"}

    def test_overrides_appended_as_root_rule_when_preserving(self):
        sheet = parse_css(":root{--x:1px}")
        collect_variables(sheet, {"x": "2px"}, preserve=True)
        assert serialize_css(sheet) == ":root{--x:1px}:root{--x:2px}"

    def test_overrides_not_appended_without_preserve(self):
        sheet = parse_css("a{color:red}")
        variables = collect_variables(sheet, {"x": "2px"}, preserve=False)
        assert variables == {"--x": "2px"}
        assert serialize_css(sheet) == "a{color:red}"
