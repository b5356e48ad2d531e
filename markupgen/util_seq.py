"""Sequence helpers for node children."""

from collections.abc import Iterator
from typing import Any, List


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, Iterator))


def flatten(value: Any) -> List[Any]:
    """Flatten nested lists, tuples and iterators into one ordered list.

    Any other value, strings included, becomes a one-element list. Nesting
    depth is not bounded by the recursion limit.
    """

    if not _is_sequence(value):
        return [value]
    out: List[Any] = []
    stack = [iter(value)]
    while stack:
        for item in stack[-1]:
            if _is_sequence(item):
                stack.append(iter(item))
                break
            out.append(item)
        else:
            stack.pop()
    return out


__all__ = ["flatten"]
