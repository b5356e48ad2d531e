"""Command-line interface for markupgen."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

from pydantic import ValidationError as SchemaError

from .document import BuiltDocument, build_document, load_document
from .errors import ValidationError
from .io_utils import warn
from .page import render_page
from .settings import RenderSettings, load_settings
from .util_fs import write_text


def _load(args: argparse.Namespace) -> Tuple[BuiltDocument, RenderSettings]:
    document_path = Path(args.document)
    if not document_path.exists():
        raise SystemExit(f"Document not found: {document_path}")
    try:
        settings = load_settings(Path(args.settings) if args.settings else None)
        spec = load_document(document_path)
    except SchemaError as exc:
        warn(f"Invalid document or settings: {exc}")
        raise SystemExit(1) from exc
    try:
        return build_document(spec, settings), settings
    except (ValidationError, KeyError) as exc:
        warn(f"{document_path}: {exc}")
        raise SystemExit(1) from exc


def _emit(text: str, out: Optional[str]) -> None:
    if out:
        write_text(out, text)
    else:
        sys.stdout.write(text)


def _handle_render(args: argparse.Namespace) -> None:
    document, settings = _load(args)
    _emit(render_page(document, settings), args.out)


def _handle_css(args: argparse.Namespace) -> None:
    document, _ = _load(args)
    _emit(document.stylesheet + "\n", args.out)


def _handle_check(args: argparse.Namespace) -> None:
    document, _ = _load(args)
    print(f"{args.document}: ok ({len(document.body)} body nodes, {len(document.styles)} styles)")


def _add_document_args(parser: argparse.ArgumentParser, *, with_out: bool = True) -> None:
    parser.add_argument("document", help="Path to the YAML document.")
    parser.add_argument(
        "--settings",
        default=None,
        help="Path to a YAML file with render settings.",
    )
    if with_out:
        parser.add_argument(
            "--out",
            default=None,
            help="File to write; stdout when omitted.",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markupgen",
        description="Render HTML and scoped CSS from YAML node documents.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a full HTML page.",
        description="Build the document tree and render it through the page template.",
    )
    _add_document_args(render_parser)
    render_parser.set_defaults(func=_handle_render)

    css_parser = subparsers.add_parser(
        "css",
        help="Render only the scoped style sheet.",
        description="Write the CSS of every scoped style in the document.",
    )
    _add_document_args(css_parser)
    css_parser.set_defaults(func=_handle_css)

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a document without rendering it.",
        description="Build every node and style and report validation errors.",
    )
    _add_document_args(check_parser, with_out=False)
    check_parser.set_defaults(func=_handle_check)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
