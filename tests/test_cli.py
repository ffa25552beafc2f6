"""Tests for the mikado CLI."""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from mikado.cli import create_parser, main

SRC_DIR = Path(__file__).resolve().parent.parent / "src"
GOAL = "Goal -> A -> A1 ✓\n          -> A2\n     -> B +\n"


@pytest.fixture
def goal_file(tmp_path, monkeypatch):
    """A notation file in an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "goal.mikado"
    path.write_text(GOAL, encoding="utf-8")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_files_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_defaults_left_to_config(self):
        args = create_parser().parse_args(["goal.mikado"])

        assert args.files == [Path("goal.mikado")]
        assert args.output_format is None
        assert args.rankdir is None
        assert args.dot is False
        assert args.auto_done is False

    def test_flags(self):
        args = create_parser().parse_args(
            ["-T", "svg", "--rankdir", "LR", "--hide-done", "--ignore-done", "a", "b"]
        )

        assert args.output_format == "svg"
        assert args.rankdir == "LR"
        assert args.hide_done is True
        assert args.ignore_done is True
        assert args.files == [Path("a"), Path("b")]

    def test_rankdir_choices(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--rankdir", "UP", "goal.mikado"])

    def test_dot_and_json_exclusive(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--dot", "--json", "goal.mikado"])


class TestMain:
    """Tests for main() end to end, without a real renderer."""

    def test_dot_to_stdout(self, goal_file, capsys):
        rc = main(["--dot", str(goal_file)])

        out = capsys.readouterr().out
        assert rc == 0
        assert out.startswith("digraph mikado {\n")
        assert '\t"Goal" [style=bold];\n' in out
        assert '\t"Goal" -> "B" [color=gray];\n' in out

    def test_auto_and_hide_done(self, goal_file, capsys):
        main(["--dot", "--auto-done", "--hide-done", str(goal_file)])

        out = capsys.readouterr().out
        assert '"B"' not in out
        assert '\t"Goal" -> "A";\n' in out
        assert '\t"A" -> "A2";\n' in out

    def test_json_output(self, goal_file, capsys):
        rc = main(["--json", str(goal_file)])

        data = json.loads(capsys.readouterr().out)
        assert rc == 0
        assert data["roots"] == ["Goal"]
        assert data["metadata"]["done_count"] == 2

    def test_config_file_applies(self, goal_file, capsys):
        (goal_file.parent / ".mikado.toml").write_text(
            '[output]\nrender = false\nrankdir = "LR"\n'
        )

        rc = main([str(goal_file)])

        assert rc == 0
        assert '\trankdir="LR";\n' in capsys.readouterr().out

    def test_renders_into_working_directory(self, goal_file, capsys):
        with patch("mikado.commands.render.render_graph", return_value=0) as mock_render:
            rc = main(["-T", "svg", str(goal_file)])

        assert rc == 0
        kwargs = mock_render.call_args.kwargs
        assert kwargs["output_path"] == Path("goal.svg")
        assert kwargs["output_format"] == "svg"
        assert kwargs["renderer"] == "dot"
        assert "Wrote" in capsys.readouterr().out

    def test_renderer_failure_stops(self, goal_file, tmp_path):
        second = tmp_path / "other.mikado"
        second.write_text("X -> Y\n", encoding="utf-8")

        with patch("mikado.commands.render.render_graph", return_value=3) as mock_render:
            rc = main([str(goal_file), str(second)])

        assert rc == 3
        assert mock_render.call_count == 1

    def test_missing_file(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        rc = main(["--dot", str(tmp_path / "missing.mikado")])

        assert rc == 1
        assert "Error: Cannot read" in capsys.readouterr().err

    def test_unresolved_continuation(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        bad = tmp_path / "bad.mikado"
        bad.write_text("A -> B\n                -> X\n", encoding="utf-8")

        rc = main(["--dot", str(bad)])

        assert rc == 1
        err = capsys.readouterr().err
        assert "bad.mikado:2" in err

    def test_verbose_reraises(self, tmp_path, monkeypatch):
        from mikado.graph.errors import UnreadableSourceError

        monkeypatch.chdir(tmp_path)

        with pytest.raises(UnreadableSourceError):
            main(["-v", "--dot", str(tmp_path / "missing.mikado")])


class TestModuleEntryPoint:
    """Invokes mikado as a subprocess."""

    def test_help(self):
        result = subprocess.run(
            [sys.executable, "-m", "mikado", "--help"],
            capture_output=True,
            env={**os.environ, "PYTHONPATH": str(SRC_DIR), "PYTHONIOENCODING": "utf-8"},
            text=True,
            timeout=60,
        )
        assert result.returncode == 0
        assert "mikado" in result.stdout
