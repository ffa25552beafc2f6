"""
mikado.commands.render - Parse Mikado files and emit or render their graphs.

Each input file is parsed, compiled to DOT and then either printed or
handed to Graphviz. Files are processed one after another; the first
failure stops the run.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from mikado.config import Options, get_config
from mikado.graph.builder import parse_file
from mikado.graph.compiler import compile_graph
from mikado.graph.serialize import serialize_registry
from mikado.render import output_path_for, render_graph


def resolve_options(args: argparse.Namespace) -> Options:
    """Combine configuration file, environment and command-line flags."""
    config = get_config(getattr(args, "config", None))
    return Options.from_config(config).with_args(args)


def run(args: argparse.Namespace) -> int:
    """Run the render command.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    options = resolve_options(args)
    verbose = getattr(args, "verbose", False)
    quiet = getattr(args, "quiet", False)
    output_dir = getattr(args, "output_dir", None)

    for source in args.files:
        source = Path(source)
        registry = parse_file(source, ignore_done=options.ignore_done)
        if verbose:
            print(f"Parsed {len(registry)} nodes from {source}", file=sys.stderr)

        if getattr(args, "json", False):
            print(json.dumps(serialize_registry(registry), indent=2, ensure_ascii=False))
            continue

        dot_source = compile_graph(registry, options.compile_options())

        if not options.render_externally:
            sys.stdout.write(dot_source)
            continue

        output_path = output_path_for(source, options.output_format, output_dir)
        if verbose:
            print(f"Rendering {source} with {options.renderer}", file=sys.stderr)
        rc = render_graph(
            dot_source,
            output_path=output_path,
            output_format=options.output_format,
            renderer=options.renderer,
        )
        if rc != 0:
            return rc
        if not quiet:
            print(f"Wrote {output_path}")

    return 0
