"""CSS rules and style sheet serialization."""

from __future__ import annotations

from typing import Any, List

from .context import Context, NodeKind
from .errors import EmptyTagError, InvalidChildTypeError, NaNAttributeValueError, NullOrEmptyCSSValueError
from .escaping import TextSink, write_escaped
from .naming import css_property_name
from .rules import AbstractNode, Attr, NodeRules, is_nan

MEDIA_PREFIX = "@media"


def is_media(node: AbstractNode) -> bool:
    """Media-like rules keep their children nested inside their braces."""
    return node.tag.startswith(MEDIA_PREFIX)


def is_css_node(value: Any) -> bool:
    return isinstance(value, AbstractNode) and value.context.kind is NodeKind.CSS


def stringify(tag: str, name: str, value: Any) -> str:
    return f"{tag} {{ {name}: {'' if value is None else value}; }}"


class CssRules(NodeRules):
    def normalize_tag(self, ctx: Context, tag: str) -> str:
        return tag.strip()

    def normalize_attr(self, ctx: Context, tag: str, name: str, value: Any) -> List[Attr]:
        return [(css_property_name(name), value)]

    def validate_tag(self, ctx: Context, tag: str) -> str:
        if not tag:
            raise EmptyTagError()
        return tag

    def validate_attr(self, ctx: Context, tag: str, name: str, value: Any) -> Attr:
        if value is None or (isinstance(value, str) and not value):
            raise NullOrEmptyCSSValueError(tag, name, value, stringify(tag, name, value))
        if not ctx.allow_nan_attr_values and is_nan(value):
            raise NaNAttributeValueError(tag, name, value, stringify(tag, name, value), "CSS")
        return name, value

    def validate_child(self, ctx: Context, tag: str, child: Any) -> Any:
        if not is_css_node(child):
            raise InvalidChildTypeError(tag, child)
        return child

    def render(self, sink: TextSink, ctx: Context, node: AbstractNode) -> None:
        assert ctx == node.context, "CSS nodes render in their own context"

        write_escaped(sink, node.tag, self.escape_tag(ctx))
        sink.write(" {")
        ename = self.escape_attr_name(ctx)
        evalue = self.escape_attr_value(ctx)
        for name, value in node.attrs.items():
            write_escaped(sink, name, ename)
            sink.write(": ")
            write_escaped(sink, value, evalue)
            sink.write(";")

        nest_children = is_media(node)
        if nest_children:
            for child in node.children:
                assert is_css_node(child)
                child.write_to(sink)

        sink.write("}")

        if not nest_children:
            for child in node.children:
                assert is_css_node(child), "CSS child elements must be CSS nodes"
                child.with_tag(f"{node.tag} {child.tag}").write_to(sink)
