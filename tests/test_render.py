"""Tests for the Graphviz renderer."""
from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from mikado.render import output_path_for, render_graph

DOT = 'digraph mikado {\n\trankdir="RL";\n}\n'


class TestOutputPath:
    """Tests for output file naming."""

    def test_base_name_in_working_directory(self):
        assert output_path_for(Path("plans/goal.mikado"), "png") == Path("goal.png")

    def test_absolute_source_uses_base_name(self, tmp_path):
        source = tmp_path / "plans" / "goal.mikado"
        assert output_path_for(source, "svg") == Path("goal.svg")

    def test_no_extension(self):
        assert output_path_for(Path("goal"), "svg") == Path("goal.svg")

    def test_output_dir(self):
        result = output_path_for(Path("plans/goal.mikado"), "pdf", Path("out"))
        assert result == Path("out/goal.pdf")


class TestRenderGraph:
    """Tests for render_graph subprocess handling."""

    def test_missing_renderer(self, capsys):
        with patch("mikado.render._check_tool", return_value=None):
            rc = render_graph(DOT, Path("goal.png"))

        assert rc == 1
        assert "dot not found" in capsys.readouterr().err

    def test_invokes_renderer(self, tmp_path):
        seen = {}

        def fake_run(cmd, **kwargs):
            seen["cmd"] = cmd
            seen["content"] = Path(cmd[2]).read_text(encoding="utf-8")
            return MagicMock(returncode=0, stderr="")

        with patch("mikado.render._check_tool", return_value="/usr/bin/dot"), patch(
            "mikado.render.subprocess.run", side_effect=fake_run
        ):
            rc = render_graph(DOT, tmp_path / "goal.svg", output_format="svg")

        assert rc == 0
        assert seen["cmd"][0] == "dot"
        assert seen["cmd"][1] == "-Tsvg"
        assert seen["cmd"][3:] == ["-o", str(tmp_path / "goal.svg")]
        assert seen["content"] == DOT
        assert not Path(seen["cmd"][2]).exists()

    def test_custom_renderer(self):
        with patch("mikado.render._check_tool", return_value="/usr/bin/neato"), patch(
            "mikado.render.subprocess.run", return_value=MagicMock(returncode=0, stderr="")
        ) as mock_run:
            render_graph(DOT, Path("goal.png"), renderer="neato")

        assert mock_run.call_args[0][0][0] == "neato"

    def test_renderer_failure(self, capsys):
        with patch("mikado.render._check_tool", return_value="/usr/bin/dot"), patch(
            "mikado.render.subprocess.run",
            return_value=MagicMock(returncode=2, stderr="syntax error in line 1"),
        ):
            rc = render_graph(DOT, Path("goal.png"))

        assert rc == 2
        err = capsys.readouterr().err
        assert "dot failed" in err
        assert "syntax error in line 1" in err
