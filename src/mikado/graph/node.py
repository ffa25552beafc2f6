"""Node and NodeRegistry - the parsed Mikado graph.

This module provides the core data structures shared by the builder
and the compiler:
- MikadoNode: A goal or prerequisite, keyed by its display name
- NodeRegistry: Ordered name -> node map with get-or-create semantics
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class MikadoNode:
    """A node in the Mikado graph.

    Attributes:
        name: Display name, already escaped for a quoted DOT literal.
        prereqs: Names this node depends on, in declaration order.
            Duplicates are kept and render as duplicate edges.
        done: True if any occurrence carried a done marker.
        root: True if the most recent occurrence had no parent.
    """

    name: str
    prereqs: list[str] = field(default_factory=list)
    done: bool = False
    root: bool = False

    @property
    def is_leaf(self) -> bool:
        """True if this node depends on nothing."""
        return len(self.prereqs) == 0

    def mark_done(self, flag: bool) -> None:
        """OR a done marker into this node. Never clears done."""
        self.done = self.done or flag

    def add_prereq(self, name: str) -> None:
        """Append a prerequisite name (duplicates allowed)."""
        self.prereqs.append(name)


class NodeRegistry:
    """Name-keyed collection of MikadoNode.

    Iteration follows node creation order, which makes every traversal
    built on top of the registry reproducible.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, MikadoNode] = {}

    def get_or_create(self, name: str) -> MikadoNode:
        """Return the node called name, creating it on first mention."""
        node = self._nodes.get(name)
        if node is None:
            node = MikadoNode(name=name)
            self._nodes[name] = node
        return node

    def find(self, name: str) -> MikadoNode | None:
        """Find node by name.

        Args:
            name: The node name to find.

        Returns:
            The matching MikadoNode, or None if not found.
        """
        return self._nodes.get(name)

    def __getitem__(self, name: str) -> MikadoNode:
        return self._nodes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[MikadoNode]:
        yield from self._nodes.values()

    def names(self) -> list[str]:
        """Return node names in creation order."""
        return list(self._nodes)

    def roots(self) -> Iterator[MikadoNode]:
        """Iterate root nodes in creation order."""
        for node in self._nodes.values():
            if node.root:
                yield node
