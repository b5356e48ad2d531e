"""Scoped styles.

A ``Style`` rewrites its CSS rules so each selector also requires a
``[v-style<id>]`` attribute, and applying the style to a DOM tree stamps that
attribute on every node of the tree. Trees that already carry a style are
left alone, so an outer style never reaches into an inner styled component.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Tuple

from .context import Context, NodeKind
from .css_model import is_css_node, is_media
from .errors import InvalidChildTypeError
from .escaping import TextSink
from .node import AttrsInput, Node, identifier_attrs, render
from .rules import AbstractNode
from .util_seq import flatten

# Style ids are process-wide; the lock is the only synchronisation point.
_style_id = 0
_style_id_lock = threading.Lock()


def next_style_id() -> int:
    global _style_id
    with _style_id_lock:
        _style_id += 1
        return _style_id


def style_attr(style_id: int) -> str:
    return f"v-style{style_id}"


def augment_css(style_id: int, node: Node) -> Node:
    if not node.attrs or is_media(node):
        tag = node.tag
    else:
        tag = f"{node.tag}[{style_attr(style_id)}]"
    # CSS has no cascade barrier; nested rules are always scoped
    children = tuple(augment_css(style_id, child) for child in node.children)
    return replace(node, tag=tag, children=children)


def augment_dom(style_id: int, value: Any) -> Any:
    if isinstance(value, Styled):
        return value
    if not isinstance(value, Node) or value.context.kind is not NodeKind.DOM:
        return value
    attrs = dict(value.attrs)
    attrs[style_attr(style_id)] = None
    return replace(
        value,
        children=tuple(augment_dom(style_id, child) for child in value.children),
        attrs=MappingProxyType(attrs),
    )


class Style:
    """A set of CSS rules scoped to the trees the style is applied to."""

    __slots__ = ("_id", "_rules")

    def __init__(self, *rules: Any) -> None:
        flat = flatten(rules)
        for rule in flat:
            if not (isinstance(rule, Node) and is_css_node(rule)):
                raise InvalidChildTypeError("Style", rule)
        self._id = next_style_id()
        self._rules: Tuple[Node, ...] = tuple(augment_css(self._id, rule) for rule in flat)

    @property
    def id(self) -> int:
        return self._id

    @property
    def rules(self) -> Tuple[Node, ...]:
        return self._rules

    def __call__(self, node: Any) -> "Styled":
        return self.apply(node)

    def apply(self, node: Any) -> "Styled":
        if isinstance(node, Styled):
            return Styled(augment_dom(self._id, node.node), self)
        if not isinstance(node, Node) or node.context.kind is not NodeKind.DOM:
            raise TypeError(f"styles apply to DOM nodes, got {type(node).__name__}")
        return Styled(augment_dom(self._id, node), self)

    def write_to(self, sink: TextSink) -> None:
        for rule in self._rules:
            rule.write_to(sink)

    def __repr__(self) -> str:
        return f"Style(id={self._id}, rules={len(self._rules)})"

    def __str__(self) -> str:
        return render(self)

    def __html__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Styled(AbstractNode):
    """A DOM node carrying a style; acts as a cascade barrier."""

    node: Node
    style: Style

    @property
    def context(self) -> Context:
        return self.node.context

    @property
    def tag(self) -> str:
        return self.node.tag

    @property
    def attrs(self):
        return self.node.attrs

    @property
    def children(self) -> Tuple[Any, ...]:
        return self.node.children

    def __call__(self, *children: Any, **attrs: Any) -> "Styled":
        return self.extend(children, identifier_attrs(attrs))

    def extend(self, children: Any = (), attrs: AttrsInput = None) -> "Styled":
        stamped = [augment_dom(self.style.id, child) for child in flatten(children)]
        return Styled(self.node.extend(stamped, attrs), self.style)

    def with_class(self, *tokens: str) -> "Styled":
        return Styled(self.node.with_class(*tokens), self.style)

    def with_tag(self, tag: str) -> "Styled":
        return Styled(self.node.with_tag(tag), self.style)

    def write_to(self, sink: TextSink) -> None:
        self.node.write_to(sink)

    def __str__(self) -> str:
        return render(self.node)

    def __html__(self) -> str:
        return render(self.node)
