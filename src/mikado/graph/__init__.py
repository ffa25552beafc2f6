"""Graph module - Mikado graph parsing and compilation.

Exports:
- MikadoNode: A goal or prerequisite
- NodeRegistry: Ordered name -> node map
- GraphBuilder: Builds a NodeRegistry from notation lines
- parse_text / parse_file: One-call parsing helpers
- CompileOptions / compile_graph: DOT generation
- MikadoError and its subclasses
"""

from mikado.graph.builder import GraphBuilder, parse_file, parse_lines, parse_text
from mikado.graph.compiler import CompileOptions, compile_graph, traversal_order
from mikado.graph.errors import (
    MikadoError,
    UnreadableSourceError,
    UnresolvedContinuationError,
)
from mikado.graph.node import MikadoNode, NodeRegistry

__all__ = [
    "MikadoNode",
    "NodeRegistry",
    "GraphBuilder",
    "parse_lines",
    "parse_text",
    "parse_file",
    "CompileOptions",
    "compile_graph",
    "traversal_order",
    "MikadoError",
    "UnreadableSourceError",
    "UnresolvedContinuationError",
]
