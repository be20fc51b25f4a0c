"""Document node types.

A decoded document is a tree of three node shapes: scalars, records (ordered
key/value pairs) and record lists. Records keep their pairs in a tuple so that
source order and duplicate keys survive decoding.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Scalar:
    """A string, number, boolean or null."""

    value: str | int | float | bool | None = None

    def text(self) -> str:
        """Return the textual representation used in table cells."""
        value = self.value
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "+Inf" if value > 0 else "-Inf"
            if value.is_integer():
                return str(int(value))
        return str(value)


@dataclass(frozen=True)
class Record:
    """An ordered sequence of (key, value) pairs."""

    pairs: tuple[tuple[Node, Node], ...] = ()

    def __iter__(self) -> Iterator[tuple[Node, Node]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class RecordList:
    """An ordered sequence of nodes that must all be records."""

    items: tuple[Node, ...] = ()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


Node = Scalar | Record | RecordList
Document = Record | RecordList


def describe(node: Node) -> str:
    """Short description of a node's shape for error messages."""
    match node:
        case Scalar(value=value):
            return f"scalar ({type(value).__name__})"
        case Record():
            return "record"
        case RecordList():
            return "list"
    raise AssertionError(f"unhandled node type: {type(node).__name__}")
