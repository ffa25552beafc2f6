"""Graph Serialization - Export a NodeRegistry to JSON-compatible dicts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mikado.graph.node import MikadoNode, NodeRegistry


def serialize_node(node: MikadoNode) -> dict[str, Any]:
    """Serialize a MikadoNode to a JSON-compatible dict.

    Args:
        node: The node to serialize.

    Returns:
        Dict suitable for JSON serialization.
    """
    result: dict[str, Any] = {
        "name": node.name,
        "done": node.done,
        "root": node.root,
    }
    if node.prereqs:
        result["prereqs"] = list(node.prereqs)
    return result


def serialize_registry(registry: NodeRegistry) -> dict[str, Any]:
    """Serialize a NodeRegistry to a JSON-compatible dict.

    Nodes keep their creation order.

    Args:
        registry: The registry to serialize.

    Returns:
        Dict with "nodes", "roots" and "metadata" keys.
    """
    nodes = [serialize_node(node) for node in registry]
    return {
        "nodes": nodes,
        "roots": [node.name for node in registry.roots()],
        "metadata": {
            "node_count": len(registry),
            "done_count": sum(1 for node in registry if node.done),
        },
    }
