"""Rendering contexts: the dispatch key for every pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    DOM = "dom"
    CSS = "css"


class EscapeMode(Enum):
    ESCAPE = "escape"
    NO_ESCAPE = "noescape"


@dataclass(frozen=True)
class Context:
    """Kind of node plus the per-context options.

    A context is created once and shared by every node built under it.
    """

    kind: NodeKind
    escape_mode: EscapeMode = EscapeMode.ESCAPE
    allow_nan_attr_values: bool = False

    @property
    def escapes_children(self) -> bool:
        return self.escape_mode is EscapeMode.ESCAPE


DEFAULT_DOM_CONTEXT = Context(NodeKind.DOM)
NOESCAPE_DOM_CONTEXT = Context(NodeKind.DOM, EscapeMode.NO_ESCAPE)
DEFAULT_CSS_CONTEXT = Context(NodeKind.CSS)
