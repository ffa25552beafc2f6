"""Run options resolved from configuration and command-line flags."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from typing import Any

from mikado.graph.compiler import CompileOptions


_TRUE_STRINGS = {"1", "true", "yes"}
_FALSE_STRINGS = {"0", "false", "no"}


def _as_bool(value: Any) -> bool:
    """Interpret a config value as a boolean.

    Accepts real booleans and the strings 1/0, true/false, yes/no in any case.

    Raises:
        ValueError: For any other value.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Expected a boolean value, got {value!r}")


@dataclass(frozen=True)
class Options:
    """Everything a run needs to parse, compile and emit a graph.

    Attributes:
        render_externally: Pipe DOT through the renderer (else print DOT).
        output_format: Renderer output format and file extension.
        rankdir: Graphviz layout direction.
        auto_done: Derive done status from prerequisites.
        hide_done: Drop done nodes and edges into them.
        ignore_done: Strip done markers without marking nodes done.
        renderer: Renderer executable name.
    """

    render_externally: bool = True
    output_format: str = "png"
    rankdir: str = "RL"
    auto_done: bool = False
    hide_done: bool = False
    ignore_done: bool = False
    renderer: str = "dot"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Options:
        """Create Options from a configuration dict.

        Args:
            config: Dict with optional "output" and "done" sections.

        Returns:
            Options with defaults for anything missing.
        """
        output = config.get("output", {})
        done = config.get("done", {})
        return cls(
            render_externally=_as_bool(output.get("render", True)),
            output_format=str(output.get("format", "png")),
            rankdir=str(output.get("rankdir", "RL")),
            auto_done=_as_bool(done.get("auto", False)),
            hide_done=_as_bool(done.get("hide", False)),
            ignore_done=_as_bool(done.get("ignore", False)),
            renderer=str(output.get("renderer", "dot")),
        )

    def with_args(self, args: argparse.Namespace) -> Options:
        """Return a copy with command-line flags applied on top.

        Flags left unset on the command line (None) keep the configured value.
        """
        overrides: dict[str, Any] = {}
        if getattr(args, "dot", False) or getattr(args, "json", False):
            overrides["render_externally"] = False
        for attr in ("output_format", "rankdir", "renderer"):
            value = getattr(args, attr, None)
            if value is not None:
                overrides[attr] = value
        for attr in ("auto_done", "hide_done", "ignore_done"):
            if getattr(args, attr, False):
                overrides[attr] = True
        return replace(self, **overrides)

    def compile_options(self) -> CompileOptions:
        """Return the subset the compiler needs."""
        return CompileOptions(
            auto_done=self.auto_done,
            hide_done=self.hide_done,
            rankdir=self.rankdir,
        )
