"""Render tab-separated files as HTML tables.

The first row is the header. Every row gets a leading line-number cell, and
cells in note/question/answer/response columns are rendered as Markdown.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from html import escape

from ..config import TSV_MARKDOWN_FIELDS, TSV_MAX_FILE_SIZE
from ..render.sanitize import SANITIZER, AttrRule
from .markdown import markdown_to_html

logger = logging.getLogger(__name__)

_MARKDOWN_FIELD = re.compile(TSV_MARKDOWN_FIELDS)
_NEWLINE = re.compile(r"(<br\s*/*>|\\n)")
# [[rc://...]] is a Markdown-ish short link that must survive rendering intact.
_RC_LINK = re.compile(r"\[\[(rc://[^\]]+)\]\]")

TSV_SANITIZER_RULES = (
    ("table", AttrRule("class", re.compile(r"data-table"))),
    ("th", AttrRule("class", re.compile(r"line-num"))),
    ("td", AttrRule("class", re.compile(r"line-num"))),
)

TSV_SANITIZER = SANITIZER.with_rules(TSV_SANITIZER_RULES)


def render_tsv(data: bytes, max_size: int = TSV_MAX_FILE_SIZE) -> str:
    """Render TSV bytes as an HTML table.

    Args:
        data: Raw TSV bytes
        max_size: Inputs larger than this are shown as preformatted text
            instead (0 disables the limit)

    Returns:
        Unsanitized HTML
    """
    text = data.decode("utf-8", errors="replace")

    if max_size and len(data) > max_size:
        logger.info("TSV input of %d bytes exceeds %d, rendering as text", len(data), max_size)
        return f"<pre>{escape(text, quote=False)}</pre>"

    out = ['<table class="data-table tsv">']
    headers: list[str] = []
    num_fields = -1
    row = 1

    # Quoted fields may span lines, so the reader sees the whole stream.
    reader = csv.reader(io.StringIO(text, newline=""), delimiter="\t", strict=True)
    while True:
        try:
            fields = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            colspan = num_fields + 1 if num_fields > 0 else 1
            message = escape(f"line {reader.line_num}: {e}", quote=False)
            out.append(f'<tr><td colspan="{colspan}">{message}</td></tr>')
            continue

        if not any(value.strip() for value in fields):
            continue

        if num_fields < 0:
            num_fields = len(fields)

        element = "th" if row == 1 else "td"
        if row == 1:
            headers = fields

        cells = [_field(element, str(row), css_class="line-num")]
        for i, value in enumerate(fields):
            if row > 1 and i < len(headers) and _MARKDOWN_FIELD.search(headers[i]):
                cells.append(_field(element, _render_markdown_field(value), escape_value=False))
            else:
                cells.append(_field(element, value))
        out.append(f"<tr>{''.join(cells)}</tr>")
        row += 1

    out.append("</table>")
    return "".join(out)


def render_tsv_sanitized(data: bytes, max_size: int = TSV_MAX_FILE_SIZE) -> bytes:
    """Render TSV bytes and sanitize the table."""
    return TSV_SANITIZER.sanitize(render_tsv(data, max_size=max_size)).encode("utf-8")


def _field(element: str, value: str, css_class: str = "", escape_value: bool = True) -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    if escape_value:
        value = escape(value, quote=False)
    return f"<{element}{class_attr}>{value}</{element}>"


def _render_markdown_field(value: str) -> str:
    md = _NEWLINE.sub("\n", value)

    links: list[str] = []

    def _stash(match: re.Match) -> str:
        links.append(match.group(0))
        return f"RCLINK{len(links) - 1}END"

    md = _RC_LINK.sub(_stash, md)
    html = markdown_to_html(md)
    for idx, link in enumerate(links):
        html = html.replace(f"RCLINK{idx}END", escape(link, quote=False))
    return html
