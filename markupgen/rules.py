"""Per-context pipeline behaviour.

Every node passes through normalize -> validate when it is built and
escape -> render when it is written out. ``NodeRules`` holds the identity
behaviour for each stage; the DOM and CSS rule sets override only what they
need.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Mapping, Sequence, Tuple

from .escaping import NO_ESCAPES, EscapeTable, TextSink

if TYPE_CHECKING:
    from .context import Context

Attr = Tuple[str, Any]


class AbstractNode(ABC):
    """Anything that renders itself in its own context."""

    context: "Context"
    tag: str
    attrs: Mapping[str, Any]
    children: Sequence[Any]

    @abstractmethod
    def write_to(self, sink: TextSink) -> None: ...

    @abstractmethod
    def with_tag(self, tag: str) -> "AbstractNode":
        """Copy with another tag, skipping validation."""


class NodeRules:
    def normalize_tag(self, ctx: "Context", tag: str) -> str:
        return tag

    def normalize_attr(self, ctx: "Context", tag: str, name: str, value: Any) -> List[Attr]:
        return [(str(name), value)]

    def normalize_child(self, ctx: "Context", tag: str, child: Any) -> Any:
        return child

    def validate_tag(self, ctx: "Context", tag: str) -> str:
        return tag

    def validate_attr(self, ctx: "Context", tag: str, name: str, value: Any) -> Attr:
        return name, value

    def validate_child(self, ctx: "Context", tag: str, child: Any) -> Any:
        return child

    def escape_tag(self, ctx: "Context") -> EscapeTable:
        return NO_ESCAPES

    def escape_attr_name(self, ctx: "Context") -> EscapeTable:
        return NO_ESCAPES

    def escape_attr_value(self, ctx: "Context") -> EscapeTable:
        return NO_ESCAPES

    def escape_child(self, ctx: "Context") -> EscapeTable:
        return NO_ESCAPES

    def render(self, sink: TextSink, ctx: "Context", node: AbstractNode) -> None:
        raise NotImplementedError


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
