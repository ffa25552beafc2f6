"""Graph Compiler - Turns a NodeRegistry into Graphviz DOT text.

Nodes are emitted breadth-first from the roots. Root nodes are drawn
bold, done nodes and edges into done nodes are dimmed. With auto_done,
a node whose prerequisites are all done counts as done too. With
hide_done, done nodes and the edges into them are left out.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from mikado.graph.node import MikadoNode, NodeRegistry

DIM_COLOR = "gray"


@dataclass(frozen=True)
class CompileOptions:
    """Options that change how a registry is compiled.

    Attributes:
        auto_done: Mark nodes done when all their prerequisites are done.
        hide_done: Omit done nodes and edges pointing at them.
        rankdir: Graphviz layout direction (RL, LR, TB, BT).
    """

    auto_done: bool = False
    hide_done: bool = False
    rankdir: str = "RL"


def traversal_order(registry: NodeRegistry) -> list[MikadoNode]:
    """Return nodes breadth-first from the roots, each exactly once.

    Roots are seeded in creation order, so the result only depends on
    the order in which the registry was built.
    """
    queue: deque[MikadoNode] = deque(registry.roots())
    seen: set[str] = set()
    order: list[MikadoNode] = []

    while queue:
        node = queue.popleft()
        if node.name in seen:
            continue
        seen.add(node.name)
        order.append(node)
        queue.extend(registry[name] for name in node.prereqs)

    return order


def propagate_done(order: list[MikadoNode], registry: NodeRegistry) -> set[str]:
    """Compute the done set after auto-done propagation.

    Walks order in reverse so prerequisites are usually settled before
    their dependents. The registry itself is not modified.

    Args:
        order: Nodes in emission order (see traversal_order).
        registry: Registry used to resolve prerequisite names.

    Returns:
        Names of all nodes that are done after propagation.
    """
    done = {node.name for node in registry if node.done}
    for node in reversed(order):
        if node.name in done or node.is_leaf:
            continue
        if all(name in done for name in node.prereqs):
            done.add(node.name)
    return done


def _quote(name: str) -> str:
    return f'"{name}"'


def _node_attributes(node: MikadoNode, is_done: bool) -> list[str]:
    attrs = []
    if node.root:
        attrs.append("style=bold")
    if is_done:
        attrs.append(f"color={DIM_COLOR}")
        attrs.append(f"fontcolor={DIM_COLOR}")
    return attrs


def compile_graph(registry: NodeRegistry, options: CompileOptions | None = None) -> str:
    """Compile a registry into DOT source.

    Args:
        registry: Parsed graph.
        options: Compile options; defaults to CompileOptions().

    Returns:
        DOT text ending with a newline. Identical input gives identical text.
    """
    options = options or CompileOptions()
    order = traversal_order(registry)
    if options.auto_done:
        done = propagate_done(order, registry)
    else:
        done = {node.name for node in registry if node.done}

    lines = ["digraph mikado {", f'\trankdir="{options.rankdir}";']

    for node in order:
        is_done = node.name in done
        attrs = _node_attributes(node, is_done)
        if attrs and not (options.hide_done and is_done):
            lines.append(f"\t{_quote(node.name)} [{', '.join(attrs)}];")

        for prereq in node.prereqs:
            edge = f"\t{_quote(node.name)} -> {_quote(prereq)}"
            if prereq in done:
                if options.hide_done:
                    continue
                edge += f" [color={DIM_COLOR}]"
            lines.append(edge + ";")

    lines.append("}")
    return "\n".join(lines) + "\n"
