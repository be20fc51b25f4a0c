"""Decode, render and sanitize YAML documents."""

from __future__ import annotations

import logging

from ..document.decode import decode_document
from ..errors import YamlTableError
from .sanitize import SANITIZER
from .tables import render_document

logger = logging.getLogger(__name__)


def render(data: bytes) -> bytes:
    """Render YAML bytes as HTML tables.

    A list of records renders as one key/value table per record; a single
    record renders as one table with a column per key. Empty input is
    returned unchanged.

    Raises:
        DecodeError: if ``data`` is not a list of records or a single record
        ShapeError: if a nested list holds something other than records
    """
    if len(data) == 0:
        return data

    try:
        document = decode_document(data)
        html = render_document(document)
    except YamlTableError as e:
        logger.info("Unable to render YAML table: %s", e)
        raise

    return html.encode("utf-8")


def render_sanitized(data: bytes) -> bytes:
    """Render YAML bytes and pass the HTML through the UGC sanitizer."""
    return SANITIZER.sanitize_bytes(render(data))


def render_string(data: bytes) -> str:
    """Render and sanitize YAML bytes, returning text."""
    return render_sanitized(data).decode("utf-8")
