"""Tests for the command line interface."""

import json

from css_var_resolver.cli.main import main


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestTransformCommand:
    def test_transform_to_stdout(self, tmp_path, capsys):
        src = _write(tmp_path / "a.css", ":root{--c:1px} a{width:var(--c)}")
        assert main(["transform", str(src), "--no-preserve"]) == 0
        assert capsys.readouterr().out == "a{width:1px}\n"

    def test_transform_to_file_with_overrides(self, tmp_path):
        src = _write(tmp_path / "a.css", ":root{--c:1px} a{width:var(--c)} b{color:red}")
        out = tmp_path / "build" / "out.css"
        code = main(
            [
                "transform",
                str(src),
                "--out",
                str(out),
                "--no-preserve",
                "--keep-all",
                "--var",
                "c=3px",
            ]
        )
        assert code == 0
        assert out.read_text(encoding="utf-8") == "a{width:3px}b{color:red}"

    def test_transform_uses_config(self, tmp_path, capsys):
        styles = tmp_path / "styles"
        styles.mkdir()
        _write(styles / "a.css", "a{width:var(--c)}")
        config = _write(
            tmp_path / "config.json",
            json.dumps(
                {
                    "preserve_originals": False,
                    "override_variables": {"c": "5px"},
                    "sources": [str(styles)],
                }
            ),
        )
        assert main(["transform", "--config", str(config)]) == 0
        assert capsys.readouterr().out == "a{width:5px}\n"

    def test_parse_error_exit_code(self, tmp_path, capsys):
        src = _write(tmp_path / "bad.css", ":root{--c:1px} a")
        assert main(["transform", str(src)]) == 1
        assert capsys.readouterr().out == ""

    def test_bad_var_assignment(self, tmp_path):
        src = _write(tmp_path / "a.css", "a{width:var(--c)}")
        assert main(["transform", str(src), "--var", "novalue"]) == 1

    def test_no_sources(self):
        assert main(["transform"]) == 1


class TestScanCommand:
    def test_scan_json(self, tmp_path, capsys):
        src = _write(tmp_path / "a.css", ":root{--a:1px} a{width:var(--a);color:var(--b)}")
        assert main(["scan", str(src)]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report == {
            "variables": {"--a": "1px"},
            "references": ["--a", "--b"],
            "undefined": ["--b"],
        }

    def test_scan_missing_path(self, tmp_path):
        assert main(["scan", str(tmp_path / "missing.css")]) == 1
