"""Render decoded documents as nested HTML tables.

Two layouts call into each other:

- Horizontal: one record becomes one table, keys as the header row and
  values as the single data row.
- Vertical: each record of a list becomes its own table with one
  key/value row per pair. Reserved keys are rewritten into links here only.

Record values are always laid out horizontally and record-list values
vertically, whichever layout contains them.
"""

from __future__ import annotations

from html import escape

from ..config import TABLE_DATA_ATTR
from ..document.nodes import Document, Node, Record, RecordList, Scalar, describe
from ..errors import ShapeError
from .links import rewrite_link

_TABLE_OPEN = f'<table data="{TABLE_DATA_ATTR}">'


def render_document(document: Document) -> str:
    """Render a list of records vertically and a single record horizontally."""
    match document:
        case RecordList():
            return render_vertical(document)
        case Record():
            return render_horizontal(document)
    raise AssertionError(f"unhandled document type: {type(document).__name__}")


def render_horizontal(record: Record) -> str:
    """Render ``record`` as a single table with its keys as columns."""
    header: list[str] = []
    body: list[str] = []
    for key, value in record:
        header.append(f"<th>{_render_key(key)}</th>")
        body.append(f"<td>{_render_value(value)}</td>")

    if not header:
        return ""
    return (
        f"{_TABLE_OPEN}"
        f"<thead><tr>{''.join(header)}</tr></thead>"
        f"<tbody><tr>{''.join(body)}</tr></tbody>"
        "</table>"
    )


def render_vertical(records: RecordList) -> str:
    """Render each record of ``records`` as its own key/value table."""
    _check_records(records)

    tables: list[str] = []
    for record in records:
        rows: list[str] = []
        for key, value in record:
            cell = rewrite_link(key, value, _render_value(value))
            rows.append(f"<tr><td>{_render_key(key)}</td><td>{cell}</td></tr>")
        tables.append(f"{_TABLE_OPEN}{''.join(rows)}</table>")
    return "".join(tables)


def _render_key(key: Node) -> str:
    match key:
        case Scalar():
            return escape(key.text(), quote=False)
        case Record():
            return render_horizontal(key)
        case RecordList():
            _check_records(key)
            return "".join(render_horizontal(record) for record in key)
    raise AssertionError(f"unhandled node type: {type(key).__name__}")


def _render_value(value: Node) -> str:
    match value:
        case Scalar():
            return escape(value.text(), quote=False)
        case Record():
            return render_horizontal(value)
        case RecordList():
            return render_vertical(value)
    raise AssertionError(f"unhandled node type: {type(value).__name__}")


def _check_records(records: RecordList) -> None:
    """Raise ShapeError unless every element of ``records`` is a record."""
    for index, item in enumerate(records):
        if not isinstance(item, Record):
            raise ShapeError(shape=describe(item), context=f"list element {index}")
