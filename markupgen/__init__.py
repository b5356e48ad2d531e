"""Build HTML and CSS node trees with scoped styles."""

from .context import (
    DEFAULT_CSS_CONTEXT,
    DEFAULT_DOM_CONTEXT,
    NOESCAPE_DOM_CONTEXT,
    Context,
    EscapeMode,
    NodeKind,
)
from .errors import (
    EmptyTagError,
    InvalidAttributeNameError,
    InvalidChildTypeError,
    NaNAttributeValueError,
    NullOrEmptyCSSValueError,
    ValidationError,
    VoidElementChildrenError,
)
from .naming import Identifier
from .node import Node, css, m, m_noescape, make_node, render
from .styled import Style, Styled
from .util_seq import flatten

__version__ = "0.1.0"

__all__ = [
    "Context",
    "DEFAULT_CSS_CONTEXT",
    "DEFAULT_DOM_CONTEXT",
    "EmptyTagError",
    "EscapeMode",
    "InvalidAttributeNameError",
    "Identifier",
    "InvalidChildTypeError",
    "NOESCAPE_DOM_CONTEXT",
    "NaNAttributeValueError",
    "Node",
    "NodeKind",
    "NullOrEmptyCSSValueError",
    "Style",
    "Styled",
    "ValidationError",
    "VoidElementChildrenError",
    "css",
    "flatten",
    "m",
    "m_noescape",
    "make_node",
    "render",
]
