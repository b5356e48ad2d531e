"""Validation errors raised while building nodes."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Base class for every construction-time failure."""

    def __init__(self, message: str, *, tag: str | None = None) -> None:
        super().__init__(message)
        self.tag = tag


class EmptyTagError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Tag cannot be empty.", tag="")


class VoidElementChildrenError(ValidationError):
    def __init__(self, tag: str, snippet: str, child: Any) -> None:
        super().__init__(f"Void tags are not allowed to have children: {snippet}", tag=tag)
        self.child = child


class InvalidChildTypeError(ValidationError):
    def __init__(self, tag: str, child: Any) -> None:
        super().__init__(
            f"CSS nodes may only have CSS node children. Found {type(child).__name__}: {child!r}",
            tag=tag,
        )
        self.child = child


class InvalidAttributeNameError(ValidationError):
    def __init__(self, tag: str, name: str, value: Any, snippet: str) -> None:
        super().__init__(f"Spaces are not allowed in DOM attribute names: {snippet}", tag=tag)
        self.name = name
        self.value = value


class NaNAttributeValueError(ValidationError):
    def __init__(self, tag: str, name: str, value: Any, snippet: str, kind: str) -> None:
        super().__init__(f"NaN values are not allowed for {kind} nodes: {snippet}", tag=tag)
        self.name = name
        self.value = value


class NullOrEmptyCSSValueError(ValidationError):
    def __init__(self, tag: str, name: str, value: Any, snippet: str) -> None:
        what = "None" if value is None else "empty"
        super().__init__(f"CSS attribute value may not be {what}: {snippet}", tag=tag)
        self.name = name
        self.value = value


__all__ = [
    "ValidationError",
    "EmptyTagError",
    "VoidElementChildrenError",
    "InvalidChildTypeError",
    "InvalidAttributeNameError",
    "NaNAttributeValueError",
    "NullOrEmptyCSSValueError",
]
