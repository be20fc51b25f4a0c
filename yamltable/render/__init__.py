"""HTML table rendering and sanitization."""

from .links import link_target, rewrite_link
from .pipeline import render, render_sanitized, render_string
from .sanitize import SANITIZER, AttrRule, Sanitizer, ugc_policy
from .tables import render_document, render_horizontal, render_vertical

__all__ = [
    "link_target",
    "rewrite_link",
    "render",
    "render_sanitized",
    "render_string",
    "SANITIZER",
    "AttrRule",
    "Sanitizer",
    "ugc_policy",
    "render_document",
    "render_horizontal",
    "render_vertical",
]
