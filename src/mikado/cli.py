"""
mikado.cli - Command-line interface.

Main entry point for the mikado CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from mikado import __version__
from mikado.commands import render

RANKDIRS = ["RL", "LR", "TB", "BT"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mikado",
        description="Draw Mikado method dependency graphs from arrow notation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Notation:
  Goal -> Prerequisite -> Sub-prerequisite
       -> Another prerequisite of Goal ✓
  # comments and blank lines are ignored

  A line starting with '->' continues from the node above the arrow.
  End a label with ✓, ' +' or ' X' to mark it done.
  Use \\n inside a label for a line break.

Examples:
  mikado plans/goal.mikado          # Render ./goal.png with Graphviz dot
  mikado -o out plans/goal.mikado   # Render out/goal.png
  mikado -T svg goal.mikado         # Render goal.svg
  mikado --dot goal.mikado          # Print DOT to stdout
  mikado --auto-done --hide-done goal.mikado

Configuration:
  Defaults can be set in .mikado.toml (working directory or a parent):

    [output]
    format = "svg"
    rankdir = "LR"

    [done]
    auto = true

  or with environment variables, e.g. MIKADO_OUTPUT_FORMAT=svg.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"mikado {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Output
    parser.add_argument(
        "-T",
        "--format",
        dest="output_format",
        help="Graphviz output format, also used as file extension (default: png)",
        metavar="FORMAT",
    )
    parser.add_argument(
        "--rankdir",
        choices=RANKDIRS,
        help="Layout direction (default: RL)",
    )
    parser.add_argument(
        "--renderer",
        help="Graphviz program used for rendering (default: dot)",
        metavar="PROGRAM",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory for rendered files (default: working directory)",
        metavar="DIR",
    )
    emit_group = parser.add_mutually_exclusive_group()
    emit_group.add_argument(
        "--dot",
        action="store_true",
        help="Print DOT source to stdout instead of rendering",
    )
    emit_group.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed graph as JSON instead of rendering",
    )

    # Done handling
    parser.add_argument(
        "--auto-done",
        action="store_true",
        help="Mark nodes done when all their prerequisites are done",
    )
    parser.add_argument(
        "--hide-done",
        action="store_true",
        help="Leave done nodes out of the graph",
    )
    parser.add_argument(
        "--ignore-done",
        action="store_true",
        help="Ignore done markers in the input",
    )

    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Mikado notation files",
        metavar="FILE",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install mikado-graph[completion]
    # Then activate: eval "$(register-python-argcomplete mikado)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    try:
        return render.run(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
