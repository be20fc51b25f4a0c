"""HTTP API for rendering YAML and TSV text."""

from .app import app

__all__ = ["app"]
