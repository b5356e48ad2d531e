"""Build nodes and scoped styles from a document spec."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .io_utils import write_rendered
from .models import DocumentSpec, NodeSpec, RuleSpec, StyleSpec
from .node import Node, make_node, m_noescape
from .settings import RenderSettings
from .styled import Style


@dataclass
class BuiltDocument:
    title: str
    lang: Optional[str]
    styles: Dict[str, Style] = field(default_factory=dict)
    head: List[Any] = field(default_factory=list)
    body: List[Any] = field(default_factory=list)

    def style_node(self) -> Optional[Node]:
        """A single <style> element holding every scoped style, or None."""
        if not self.styles:
            return None
        return m_noescape("style", list(self.styles.values()))

    @property
    def stylesheet(self) -> str:
        buffer = io.StringIO()
        write_rendered(buffer, *self.styles.values())
        return buffer.getvalue()


def load_document(path: Path) -> DocumentSpec:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return DocumentSpec.model_validate(data)


def build_rule(spec: RuleSpec, settings: RenderSettings) -> Node:
    children = [build_rule(rule, settings) for rule in spec.rules]
    return make_node(settings.css_context(), spec.selector, children, spec.declarations)


def build_style(spec: StyleSpec, settings: RenderSettings) -> Style:
    return Style([build_rule(rule, settings) for rule in spec.rules])


def build_node(spec: NodeSpec, settings: RenderSettings, styles: Dict[str, Style]) -> Any:
    children = [
        build_node(child, settings, styles) if isinstance(child, NodeSpec) else child
        for child in spec.children
    ]
    node = make_node(settings.context_for(spec.tag), spec.tag, children, spec.attrs)
    if spec.classes:
        node = node.with_class(*spec.classes)
    if spec.style is None:
        return node
    if spec.style not in styles:
        raise KeyError(f"Style {spec.style!r} not found for <{node.tag}>")
    return styles[spec.style](node)


def build_document(spec: DocumentSpec, settings: Optional[RenderSettings] = None) -> BuiltDocument:
    settings = settings or RenderSettings()
    styles: Dict[str, Style] = {}
    for style_spec in spec.styles:
        styles[style_spec.name] = build_style(style_spec, settings)

    def build(item: Any) -> Any:
        return build_node(item, settings, styles) if isinstance(item, NodeSpec) else item

    return BuiltDocument(
        title=spec.title,
        lang=spec.lang or settings.lang,
        styles=styles,
        head=[build(item) for item in spec.head],
        body=[build(item) for item in spec.body],
    )
