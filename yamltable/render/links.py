"""Rewrite reserved key/value pairs into links."""

from __future__ import annotations

from html import escape

from ..config import LINK_FIELDS
from ..document.nodes import Node, Scalar


def link_target(key: Node, value: Node) -> str | None:
    """Return the href for a reserved ``key`` with a scalar ``value``, if any."""
    if not isinstance(key, Scalar) or not isinstance(value, Scalar):
        return None
    if not isinstance(key.value, str):
        return None
    template = LINK_FIELDS.get(key.value)
    if template is None:
        return None
    return template.format(value.text())


def rewrite_link(key: Node, value: Node, rendered: str) -> str:
    """Wrap an already rendered value in an anchor when its key is reserved.

    ``slug: genesis`` links to ``content/genesis.md``; ``link: en_ult`` links
    to ``en_ult/01.md``. Anything else is returned unchanged.
    """
    href = link_target(key, value)
    if href is None:
        return rendered
    return f'<a href="{escape(href, quote=True)}">{rendered}</a>'
