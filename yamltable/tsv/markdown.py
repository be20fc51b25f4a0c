"""Markdown rendering for TSV note cells.

Cells in note/question/answer columns hold short CommonMark snippets. Raw HTML
in a cell is escaped rather than passed through; the rendered table is
sanitized afterwards.
"""

from __future__ import annotations

from markdown_it import MarkdownIt

_MD = MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])


def markdown_to_html(md: str) -> str:
    """Render a Markdown cell as HTML, without the trailing newline."""
    return _MD.render(md).rstrip("\n")
