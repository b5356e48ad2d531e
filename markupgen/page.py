"""Full-page rendering through Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .document import BuiltDocument
from .settings import RenderSettings

TEMPLATES_DIR = Path(__file__).parent / "templates"


def jinja_env(settings: RenderSettings) -> Environment:
    """Create a Jinja environment; a configured template dir wins over the built-ins."""

    template_dirs: List[Path] = []
    if settings.template_dir is not None:
        template_dirs.append(settings.template_dir)
    template_dirs.append(TEMPLATES_DIR)
    return Environment(
        loader=FileSystemLoader(template_dirs),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_page(document: BuiltDocument, settings: RenderSettings) -> str:
    # Nodes expose __html__, so autoescaping leaves rendered markup alone
    # and escapes plain text items.
    template = jinja_env(settings).get_template(settings.template)
    return template.render(
        doctype=settings.doctype,
        lang=document.lang,
        title=document.title,
        head=document.head,
        style=document.style_node(),
        body=document.body,
    )
