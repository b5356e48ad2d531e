"""Utility helpers for text output and logging."""

from __future__ import annotations

import sys
from typing import Any, Optional

from .escaping import TextSink
from .node import render


def write_rendered(sink: TextSink, *nodes: Any, separator: Optional[str] = None) -> None:
    """Render several nodes into one sink, optionally separated."""
    for index, node in enumerate(nodes):
        if index and separator:
            sink.write(separator)
        render(node, sink)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
