"""Tests for the goxgen command-line entry point."""

from __future__ import annotations

from goxgen.cli import main


def _write(tmp_path, text: str):
    path = tmp_path / "doc.json"
    path.write_text(text)
    return str(path)


class TestMain:
    def test_prints_lowered_source(self, tmp_path, capsys):
        path = _write(tmp_path, '{"tag": "br"}')
        assert main([path, "--genname", "ui"]) == 0
        assert capsys.readouterr().out.strip() == 'ui.Tag("br")'

    def test_stats(self, tmp_path, capsys):
        path = _write(tmp_path, '{"tag": "p", "children": ["a", "b"]}')
        assert main([path, "-g", "g", "--stats"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Tag\t1", "Text\t2"]

    def test_demo_mode(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "built-in demo" in out
        assert 'vecty.Tag("div"' in out

    def test_error_exit_status(self, tmp_path, capsys):
        path = _write(tmp_path, '{"tag": "pkg.Comp"}')
        assert main([path]) == 1
        assert "Unsupported tag shape" in capsys.readouterr().err
