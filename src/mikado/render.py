"""Graphviz renderer.

Invokes a Graphviz layout program (``dot`` by default) as a subprocess
to turn compiled DOT text into an image file.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path


def _check_tool(name: str) -> str | None:
    """Return the path to an executable, or None if not found."""
    return shutil.which(name)


def output_path_for(source: Path, output_format: str, output_dir: Path | None = None) -> Path:
    """Name the rendered file after its source.

    ``plans/goal.mikado`` rendered as png becomes ``goal.png`` in the
    working directory, or in output_dir when given.
    """
    source = Path(source)
    name = f"{source.stem}.{output_format}"
    if output_dir is not None:
        return Path(output_dir) / name
    return Path(name)


def render_graph(
    dot_source: str,
    output_path: Path,
    output_format: str = "png",
    renderer: str = "dot",
) -> int:
    """Render DOT text to a file via Graphviz.

    Args:
        dot_source: Compiled DOT text.
        output_path: Destination file.
        output_format: Graphviz output format (png, svg, pdf, ...).
        renderer: Graphviz program to run.

    Returns:
        0 on success, non-zero on failure.
    """
    if not _check_tool(renderer):
        print(f"Error: {renderer} not found on PATH.", file=sys.stderr)
        print("Install Graphviz: https://graphviz.org/download/", file=sys.stderr)
        return 1

    # Write DOT to temp file
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".dot",
        encoding="utf-8",
        delete=False,
    ) as tmp:
        tmp.write(dot_source)
        tmp_path = tmp.name

    try:
        cmd = [
            renderer,
            f"-T{output_format}",
            tmp_path,
            "-o",
            str(output_path),
        ]

        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )

        if result.returncode != 0:
            print(f"Error: {renderer} failed.", file=sys.stderr)
            if result.stderr:
                print(result.stderr, file=sys.stderr)
            return result.returncode

        return 0

    finally:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
