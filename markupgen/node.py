"""Immutable nodes and the construction pipeline.

A node is built by running its tag, children and attributes through the
rules selected by its context: normalize, then validate. Validation happens
only here, so rendering can trust every node it is given.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .context import DEFAULT_CSS_CONTEXT, DEFAULT_DOM_CONTEXT, NOESCAPE_DOM_CONTEXT, Context, NodeKind
from .css_model import CssRules
from .dom_model import DomRules
from .escaping import TextSink
from .naming import Identifier, kebab
from .rules import AbstractNode, NodeRules
from .util_seq import flatten

RULES: Dict[NodeKind, NodeRules] = {
    NodeKind.DOM: DomRules(),
    NodeKind.CSS: CssRules(),
}

AttrsInput = Optional[Mapping[str, Any] | Iterable[Tuple[str, Any]]]


def rules_for(ctx: Context) -> NodeRules:
    return RULES[ctx.kind]


@dataclass(frozen=True, eq=False)
class Node(AbstractNode):
    context: Context
    tag: str
    children: Tuple[Any, ...] = ()
    attrs: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.context == other.context
            and self.tag == other.tag
            and self.children == other.children
            and dict(self.attrs) == dict(other.attrs)
        )

    def __hash__(self) -> int:
        return hash((self.context, self.tag, self.children, tuple(self.attrs.items())))

    def __call__(self, *children: Any, **attrs: Any) -> "Node":
        return self.extend(children, identifier_attrs(attrs))

    def extend(self, children: Any = (), attrs: AttrsInput = None) -> "Node":
        """Return a copy with more children and attributes.

        Only the new pieces are normalized and validated. New attributes
        override existing ones; new children come before the existing ones.
        """
        new_children = process_children(self.context, self.tag, children)
        new_attrs = process_attrs(self.context, self.tag, attrs)
        merged = dict(self.attrs)
        merged.update(new_attrs)
        return Node(self.context, self.tag, new_children + self.children, MappingProxyType(merged))

    def with_class(self, *tokens: str) -> "Node":
        """Append class names to the ``class`` attribute.

        ``Identifier`` tokens are kebab-cased; plain strings are used as given.
        """
        if self.context.kind is not NodeKind.DOM:
            raise TypeError(f"class shorthand is only available for DOM nodes, not {self.tag!r}")
        classes: List[str] = []
        existing = self.attrs.get("class")
        if existing is not None:
            classes.append(str(existing))
        classes.extend(kebab(token) if isinstance(token, Identifier) else token for token in tokens)
        return self.extend(attrs={"class": " ".join(classes)})

    def with_tag(self, tag: str) -> "Node":
        return replace(self, tag=tag)

    def write_to(self, sink: TextSink) -> None:
        rules_for(self.context).render(sink, self.context, self)

    def __str__(self) -> str:
        return render(self)

    def __html__(self) -> str:
        return render(self)


def identifier_attrs(attrs: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """Mark keyword argument names so they get normalized as identifiers."""
    return [(Identifier(name), value) for name, value in attrs.items()]


def _attr_pairs(attrs: AttrsInput) -> List[Tuple[str, Any]]:
    if attrs is None:
        return []
    if isinstance(attrs, Mapping):
        return list(attrs.items())
    return [(name, value) for name, value in attrs]


def process_children(ctx: Context, tag: str, children: Any) -> Tuple[Any, ...]:
    rules = rules_for(ctx)
    return tuple(
        rules.validate_child(ctx, tag, rules.normalize_child(ctx, tag, child))
        for child in flatten(children)
    )


def process_attrs(ctx: Context, tag: str, attrs: AttrsInput) -> Dict[str, Any]:
    # A single attribute may normalize to several.
    rules = rules_for(ctx)
    processed: Dict[str, Any] = {}
    for name, value in _attr_pairs(attrs):
        for norm_name, norm_value in rules.normalize_attr(ctx, tag, name, value):
            valid_name, valid_value = rules.validate_attr(ctx, tag, norm_name, norm_value)
            processed[valid_name] = valid_value
    return processed


def make_node(ctx: Context, tag: str, children: Any = (), attrs: AttrsInput = None) -> Node:
    rules = rules_for(ctx)
    tag = rules.validate_tag(ctx, rules.normalize_tag(ctx, tag))
    return Node(
        ctx,
        tag,
        process_children(ctx, tag, children),
        MappingProxyType(process_attrs(ctx, tag, attrs)),
    )


def _merge_attrs(attrs: AttrsInput, kwattrs: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    return _attr_pairs(attrs) + identifier_attrs(kwattrs)


def m(tag: Any, *children: Any, attrs: AttrsInput = None, **kwattrs: Any) -> Node:
    """Build a DOM node; pass a ``Context`` first to build under another context."""
    ctx = DEFAULT_DOM_CONTEXT
    if isinstance(tag, Context):
        if not children:
            raise TypeError("m() takes a tag after the context")
        ctx, tag, children = tag, children[0], children[1:]
    return make_node(ctx, tag, children, _merge_attrs(attrs, kwattrs))


def m_noescape(tag: str, *children: Any, attrs: AttrsInput = None, **kwattrs: Any) -> Node:
    """Build a DOM node whose text children are written without escaping."""
    return make_node(NOESCAPE_DOM_CONTEXT, tag, children, _merge_attrs(attrs, kwattrs))


def css(selector: str, *children: Any, attrs: AttrsInput = None, **kwattrs: Any) -> Node:
    return make_node(DEFAULT_CSS_CONTEXT, selector, children, _merge_attrs(attrs, kwattrs))


def render(node: Any, sink: Optional[TextSink] = None) -> Optional[str]:
    """Write ``node`` to ``sink``, or return the text when no sink is given."""
    if sink is not None:
        node.write_to(sink)
        return None
    buffer = io.StringIO()
    node.write_to(buffer)
    return buffer.getvalue()
