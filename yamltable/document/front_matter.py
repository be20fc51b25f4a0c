"""Front matter handling for Markdown files with a YAML header."""

from __future__ import annotations

import re

import yaml

_DELIMITER = re.compile(rb"^---[ \t]*\r?$", re.MULTILINE)


def split_front_matter(data: bytes) -> tuple[bytes, bytes]:
    """Split ``data`` into (front matter, body).

    Front matter is the text between an opening ``---`` on the first line and
    the next ``---`` line. Without both delimiters, returns ``(b"", data)``.
    """
    opening = _DELIMITER.match(data)
    if opening is None:
        return b"", data

    start = _line_end(data, opening.end())
    closing = _DELIMITER.search(data, start)
    if closing is None:
        return b"", data

    return data[start:closing.start()], data[_line_end(data, closing.end()):]


def strip_front_matter(data: bytes) -> bytes:
    """Return the body of ``data`` with YAML front matter removed.

    Returns ``data`` unchanged if it has no front matter or the front matter
    is not a YAML mapping.
    """
    front_matter, body = split_front_matter(data)
    if body == data:
        return data
    if not front_matter.strip():
        return body

    try:
        parsed = yaml.safe_load(front_matter)
    except yaml.YAMLError:
        return data
    if not isinstance(parsed, dict):
        return data
    return body


def _line_end(data: bytes, pos: int) -> int:
    """Index just past the newline at or after ``pos``."""
    newline = data.find(b"\n", pos)
    return len(data) if newline == -1 else newline + 1
