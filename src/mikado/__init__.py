"""
mikado - Mikado method dependency graphs from plain text

Write the goal and its prerequisites as arrow chains, one line at a
time; mikado turns them into a Graphviz graph with finished work dimmed.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mikado-graph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from mikado.graph import (
    CompileOptions,
    GraphBuilder,
    MikadoError,
    MikadoNode,
    NodeRegistry,
    UnreadableSourceError,
    UnresolvedContinuationError,
    compile_graph,
    parse_file,
    parse_text,
)

__all__ = [
    "__version__",
    "CompileOptions",
    "GraphBuilder",
    "MikadoError",
    "MikadoNode",
    "NodeRegistry",
    "UnreadableSourceError",
    "UnresolvedContinuationError",
    "compile_graph",
    "parse_file",
    "parse_text",
]
