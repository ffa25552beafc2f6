"""Graph Builder - Constructs a NodeRegistry from Mikado notation.

The notation is line based. Each line is a chain of labels joined by
``->``; a label depends on the label to its right. A line that starts
with ``->`` continues from an earlier node: the arrow's column is matched
against the column ranges of previously parsed labels, most recent first.

    Goal -> Prereq A -> Leaf A1
                     -> Leaf A2 ✓
         -> Prereq B +
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from mikado.graph.errors import UnreadableSourceError, UnresolvedContinuationError
from mikado.graph.node import NodeRegistry

ARROW = "->"

# Checkmark (optionally spaced) or whitespace then '+' / 'X', at end of label
DONE_MARKER = re.compile(r"(?:\s*[✓✔]|\s+[+X])$")


def split_done_marker(label: str) -> tuple[str, bool]:
    """Strip a trailing done marker from a label.

    Args:
        label: Raw segment text.

    Returns:
        Tuple of (trimmed label without marker, whether a marker was found).
    """
    # Trim both sides first: the space after an arrow must not count as the
    # separator, so "A -> X" keeps a node named "X" instead of an empty done one.
    label = label.strip()
    match = DONE_MARKER.search(label)
    if match is None:
        return label, False
    return label[: match.start()].strip(), True


def escape_name(label: str) -> str:
    """Escape double quotes so the name can sit inside a quoted literal."""
    return label.replace('"', '\\"')


def is_ignored_line(text: str) -> bool:
    """True for blank lines and '#' comments."""
    stripped = text.strip()
    return not stripped or stripped.startswith("#")


@dataclass(frozen=True)
class Occurrence:
    """One parsed mention of a node and the columns it spans on its line.

    Attributes:
        name: Node name of this mention.
        start: Column of the label's first non-space character.
        end: Column just past the label and its following arrow.
        line_number: 1-based source line of the mention.
    """

    name: str
    start: int
    end: int
    line_number: int

    def contains(self, column: int) -> bool:
        """True if a continuation arrow at column attaches here."""
        return self.start <= column <= self.end


@dataclass
class GraphBuilder:
    """Builder for a NodeRegistry.

    Feed lines in source order with add_line() or add_lines(), then call
    build(). Lines must arrive in order because continuation lines can
    only attach to text parsed before them.

    Attributes:
        ignore_done: Strip done markers without marking nodes done.
        source: Name used in error messages (usually the file path).
    """

    ignore_done: bool = False
    source: str | None = None

    _registry: NodeRegistry = field(default_factory=NodeRegistry, init=False)
    _occurrences: list[Occurrence] = field(default_factory=list, init=False, repr=False)

    def add_lines(self, lines: Iterable[tuple[int, str]]) -> None:
        """Add (line_number, text) tuples in order."""
        for line_number, text in lines:
            self.add_line(line_number, text)

    def add_line(self, line_number: int, text: str) -> None:
        """Parse one source line into the registry.

        Args:
            line_number: 1-based line number, used in error messages.
            text: Raw line text without the newline.

        Raises:
            UnresolvedContinuationError: If the line starts with '->' and
                no earlier mention spans the arrow's column.
        """
        if is_ignored_line(text):
            return

        segments = text.split(ARROW)
        cursor = 0
        parent: str | None = None

        if not segments[0].strip():
            column = len(segments[0])
            occurrence = self.find_occurrence(column)
            if occurrence is None:
                raise UnresolvedContinuationError(line_number, text, self.source)
            parent = occurrence.name
            cursor = len(segments[0]) + len(ARROW)
            segments = segments[1:]

        for segment in segments:
            start = cursor + len(segment) - len(segment.lstrip())
            cursor += len(segment) + len(ARROW)

            label, marked = split_done_marker(segment)
            if not label:
                continue

            name = escape_name(label)
            node = self._registry.get_or_create(name)
            node.mark_done(marked and not self.ignore_done)
            node.root = parent is None
            if parent is not None:
                self._registry[parent].add_prereq(name)

            self._occurrences.append(Occurrence(name, start, cursor, line_number))
            parent = name

    def find_occurrence(self, column: int) -> Occurrence | None:
        """Find the most recent mention whose column range contains column."""
        for occurrence in reversed(self._occurrences):
            if occurrence.contains(column):
                return occurrence
        return None

    def build(self) -> NodeRegistry:
        """Return the registry built so far."""
        return self._registry


def parse_lines(
    lines: Iterable[str],
    ignore_done: bool = False,
    source: str | None = None,
) -> NodeRegistry:
    """Parse raw lines (numbered from 1) into a NodeRegistry."""
    builder = GraphBuilder(ignore_done=ignore_done, source=source)
    builder.add_lines(enumerate(lines, start=1))
    return builder.build()


def parse_text(text: str, ignore_done: bool = False, source: str | None = None) -> NodeRegistry:
    """Parse a whole document into a NodeRegistry."""
    return parse_lines(text.splitlines(), ignore_done=ignore_done, source=source)


def parse_file(path: Path | str, ignore_done: bool = False) -> NodeRegistry:
    """Read and parse a Mikado notation file.

    Args:
        path: File to read (UTF-8).
        ignore_done: Strip done markers without marking nodes done.

    Returns:
        The parsed NodeRegistry.

    Raises:
        UnreadableSourceError: If the file cannot be read or decoded.
        UnresolvedContinuationError: If a continuation line has no parent.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise UnreadableSourceError(str(path), reason) from e
    return parse_text(text, ignore_done=ignore_done, source=str(path))
