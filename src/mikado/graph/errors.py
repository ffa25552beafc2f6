"""Errors raised while reading and parsing Mikado graph sources."""

from __future__ import annotations


class MikadoError(Exception):
    """Base class for all mikado errors."""


class UnreadableSourceError(MikadoError):
    """An input source could not be opened or decoded.

    Attributes:
        path: The source that failed to load.
        reason: The underlying I/O failure, as text.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class UnresolvedContinuationError(MikadoError, ValueError):
    """A line starting with '->' does not line up with any earlier node.

    Attributes:
        line_number: 1-based line number in the source.
        line: The raw text of the offending line.
        source: Optional name of the source being parsed.
    """

    def __init__(self, line_number: int, line: str, source: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        self.source = source
        where = f"{source}:{line_number}" if source else f"line {line_number}"
        super().__init__(f"No parent node found for continuation at {where}: {line!r}")
