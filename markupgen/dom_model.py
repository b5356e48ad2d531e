"""DOM rules and HTML serialization."""

from __future__ import annotations

from typing import Any, List, Mapping

from .context import Context
from .errors import (
    EmptyTagError,
    InvalidAttributeNameError,
    NaNAttributeValueError,
    VoidElementChildrenError,
)
from .escaping import ATTR_VALUE_ESCAPES, HTML_ESCAPES, NO_ESCAPES, EscapeTable, TextSink, write_escaped
from .naming import Identifier, dom_attr_name
from .rules import AbstractNode, Attr, NodeRules, is_nan

VOID_TAGS = frozenset(
    [
        "track", "hr", "col", "embed", "br", "circle", "input", "base",
        "use", "source", "polyline", "param", "ellipse", "link", "img",
        "path", "wbr", "line", "stop", "rect", "area", "meta", "polygon",
    ]
)


def is_void(tag: str) -> bool:
    return tag in VOID_TAGS


def stringify(tag: str, attr: str = "") -> str:
    """Short markup snippet used in error messages."""
    return f"<{tag}{attr}{' />' if is_void(tag) else '>'}"


class DomRules(NodeRules):
    def normalize_tag(self, ctx: Context, tag: str) -> str:
        return tag.strip()

    def normalize_attr(self, ctx: Context, tag: str, name: str, value: Any) -> List[Attr]:
        if isinstance(name, Identifier):
            return [(dom_attr_name(name), value)]
        return [(str(name), value)]

    def validate_tag(self, ctx: Context, tag: str) -> str:
        if not tag:
            raise EmptyTagError()
        return tag

    def validate_attr(self, ctx: Context, tag: str, name: str, value: Any) -> Attr:
        if not ctx.allow_nan_attr_values and is_nan(value):
            raise NaNAttributeValueError(tag, name, value, stringify(tag, f" {name}={value}"), "DOM")
        if any(c.isspace() for c in name):
            raise InvalidAttributeNameError(tag, name, value, stringify(tag, f" {name}={value}"))
        return name, value

    def validate_child(self, ctx: Context, tag: str, child: Any) -> Any:
        if is_void(tag):
            raise VoidElementChildrenError(tag, stringify(tag), child)
        return child

    def escape_tag(self, ctx: Context) -> EscapeTable:
        return HTML_ESCAPES

    def escape_attr_name(self, ctx: Context) -> EscapeTable:
        return HTML_ESCAPES

    def escape_attr_value(self, ctx: Context) -> EscapeTable:
        return ATTR_VALUE_ESCAPES

    def escape_child(self, ctx: Context) -> EscapeTable:
        return HTML_ESCAPES if ctx.escapes_children else NO_ESCAPES

    def render(self, sink: TextSink, ctx: Context, node: AbstractNode) -> None:
        etag = self.escape_tag(ctx)
        sink.write("<")
        write_escaped(sink, node.tag, etag)
        self._render_attrs(sink, ctx, node.attrs)
        if is_void(node.tag):
            assert not node.children, "void elements never hold children"
            sink.write(" />")
            return
        sink.write(">")
        self._render_children(sink, ctx, node.children)
        sink.write("</")
        write_escaped(sink, node.tag, etag)
        sink.write(">")

    def _render_attrs(self, sink: TextSink, ctx: Context, attrs: Mapping[str, Any]) -> None:
        ename = self.escape_attr_name(ctx)
        evalue = self.escape_attr_value(ctx)
        for name, value in attrs.items():
            sink.write(" ")
            write_escaped(sink, name, ename)
            if value is not None:
                sink.write('="')
                write_escaped(sink, value, evalue)
                sink.write('"')

    def _render_children(self, sink: TextSink, ctx: Context, children: Any) -> None:
        echild = self.escape_child(ctx)
        for child in children:
            if isinstance(child, AbstractNode) and child.context.kind is ctx.kind:
                # DOM nodes render in their own context
                child.write_to(sink)
            else:
                # Scalars, CSS nodes and styles render as text in the parent context
                write_escaped(sink, child, echild)
