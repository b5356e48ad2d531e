"""Render settings loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .context import Context, EscapeMode, NodeKind


class RenderSettings(BaseModel):
    """Options shared by every node built for a document."""

    allow_nan_attr_values: bool = Field(
        False,
        alias="allowNanAttrValues",
        description="Accept float NaN as an attribute or declaration value.",
    )
    noescape_tags: List[str] = Field(
        default_factory=lambda: ["script", "style"],
        alias="noescapeTags",
        description="Tags whose text children are written without escaping.",
    )
    doctype: bool = Field(True, description="Emit <!DOCTYPE html> before the page.")
    lang: Optional[str] = Field(None, description="Default lang attribute for <html>.")
    template: str = Field("page.html.jinja", description="Page template name.")
    template_dir: Optional[Path] = Field(
        None,
        alias="templateDir",
        description="Extra directory searched for page templates before the built-in ones.",
    )

    model_config = ConfigDict(populate_by_name=True)

    def context_for(self, tag: str) -> Context:
        """DOM context for ``tag``; raw-text tags skip child escaping."""
        mode = EscapeMode.NO_ESCAPE if tag.strip() in self.noescape_tags else EscapeMode.ESCAPE
        return Context(NodeKind.DOM, mode, self.allow_nan_attr_values)

    def css_context(self) -> Context:
        return Context(NodeKind.CSS, EscapeMode.ESCAPE, self.allow_nan_attr_values)


def load_settings(path: Optional[Path]) -> RenderSettings:
    if path is None:
        return RenderSettings()
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return RenderSettings.model_validate(data)


__all__ = ["RenderSettings", "load_settings"]
