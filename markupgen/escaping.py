"""Character escaping tables for rendered output."""

from __future__ import annotations

from typing import Any, Dict, Protocol


class TextSink(Protocol):
    def write(self, text: str) -> Any: ...


EscapeTable = Dict[int, str]


def chardict(chars: str) -> EscapeTable:
    """Map every character to its numeric character reference."""
    return {ord(c): f"&#{ord(c)};" for c in chars}


# Quotes and whitespace must not leak out of a quoted attribute value.
ATTR_VALUE_ESCAPES = chardict("&<>\"\n\r\t")

HTML_ESCAPES = chardict("&<>\"'`!@$%()=+{}[]")

# CSS output, and children of nodes built without child escaping.
NO_ESCAPES: EscapeTable = {}


def escape(value: Any, table: EscapeTable) -> str:
    text = value if isinstance(value, str) else str(value)
    if not table:
        return text
    return text.translate(table)


def write_escaped(sink: TextSink, value: Any, table: EscapeTable) -> None:
    sink.write(escape(value, table))
