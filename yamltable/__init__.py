"""Render YAML metadata and TSV files as sanitized HTML tables."""

__version__ = "0.1.0"

from .errors import DecodeError, ShapeError, YamlTableError
from .render.pipeline import render, render_sanitized, render_string

__all__ = [
    "__version__",
    "DecodeError",
    "ShapeError",
    "YamlTableError",
    "render",
    "render_sanitized",
    "render_string",
]
