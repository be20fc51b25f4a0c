"""TSV table rendering."""

from .markdown import markdown_to_html
from .render import TSV_SANITIZER, render_tsv, render_tsv_sanitized

__all__ = [
    "markdown_to_html",
    "TSV_SANITIZER",
    "render_tsv",
    "render_tsv_sanitized",
]
