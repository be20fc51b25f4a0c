"""Allow-list HTML sanitization.

Rendered tables are passed through a fixed policy before they are served:
only allow-listed tags and attributes survive, dangerous subtrees are removed
along with their content, and every other tag is unwrapped so its text is
kept. The parser is the standard library's, so sanitizing never raises on
malformed markup.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from html import escape
from html.parser import HTMLParser
from types import MappingProxyType
from urllib.parse import urlsplit

from ..config import TABLE_DATA_ATTR


# Tags to completely remove (including content)
REMOVE_TAGS = frozenset(
    {
        "script",
        "style",
        "noscript",
        "iframe",
        "frame",
        "frameset",
        "object",
        "embed",
        "applet",
        "meta",
        "link",
        "base",
        "template",
        "textarea",
        "select",
        "svg",
        "math",
    }
)

# HTML void elements (no end tag in normal HTML)
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

UGC_TAGS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdi",
        "bdo",
        "blockquote",
        "br",
        "caption",
        "cite",
        "code",
        "col",
        "colgroup",
        "dd",
        "del",
        "dfn",
        "div",
        "dl",
        "dt",
        "em",
        "figcaption",
        "figure",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "kbd",
        "li",
        "mark",
        "ol",
        "p",
        "pre",
        "q",
        "s",
        "samp",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "time",
        "tr",
        "tt",
        "u",
        "ul",
        "var",
        "wbr",
    }
)

URL_SCHEMES = frozenset({"http", "https", "mailto"})

_NUMBER = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class AttrRule:
    """An allowed attribute, optionally restricted to matching values."""

    name: str
    pattern: re.Pattern[str] | None = None
    url: bool = False


@dataclass(frozen=True)
class Sanitizer:
    """Immutable allow-list policy.

    ``attrs`` maps a tag name to the attribute rules allowed on it; rules
    under ``"*"`` apply to every allowed tag.
    """

    tags: frozenset[str]
    attrs: Mapping[str, tuple[AttrRule, ...]] = field(default_factory=dict)
    remove_tags: frozenset[str] = REMOVE_TAGS
    url_schemes: frozenset[str] = URL_SCHEMES
    link_rel: str | None = "nofollow"

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))

    def with_rules(self, rules: Iterable[tuple[str, AttrRule]]) -> Sanitizer:
        """Return a copy of this policy that also allows ``rules``."""
        attrs = {tag: list(tag_rules) for tag, tag_rules in self.attrs.items()}
        for tag, rule in rules:
            attrs.setdefault(tag, []).append(rule)
        return Sanitizer(
            tags=self.tags,
            attrs={tag: tuple(tag_rules) for tag, tag_rules in attrs.items()},
            remove_tags=self.remove_tags,
            url_schemes=self.url_schemes,
            link_rel=self.link_rel,
        )

    def sanitize(self, html: str) -> str:
        """Sanitize an HTML fragment."""
        parser = _SanitizingHTMLParser(self)
        parser.feed(html)
        parser.close()
        return "".join(parser.out)

    def sanitize_bytes(self, data: bytes) -> bytes:
        """Sanitize UTF-8 encoded HTML."""
        if not data:
            return b""
        return self.sanitize(data.decode("utf-8", errors="replace")).encode("utf-8")

    def allowed_value(self, tag: str, name: str, value: str) -> bool:
        """Return True when attribute ``name=value`` may stay on ``tag``."""
        for rule in (*self.attrs.get(tag, ()), *self.attrs.get("*", ())):
            if rule.name != name:
                continue
            if rule.url and not self.is_safe_url(value):
                continue
            if rule.pattern is not None and not rule.pattern.search(value):
                continue
            return True
        return False

    def is_safe_url(self, value: str) -> bool:
        """Relative URLs and URLs with an allowed scheme are safe."""
        try:
            scheme = urlsplit(value.strip()).scheme.lower()
        except ValueError:
            return False
        return scheme == "" or scheme in self.url_schemes


def ugc_policy() -> Sanitizer:
    """Build the policy used for user-generated content."""
    return Sanitizer(
        tags=UGC_TAGS,
        attrs={
            "*": (AttrRule("title"), AttrRule("dir", re.compile(r"^(?:ltr|rtl|auto)$")), AttrRule("lang")),
            "a": (AttrRule("href", url=True),),
            "img": (
                AttrRule("src", url=True),
                AttrRule("alt"),
                AttrRule("width", _NUMBER),
                AttrRule("height", _NUMBER),
            ),
            "ol": (AttrRule("start", _NUMBER),),
            "table": (AttrRule("data", re.compile(rf"^{re.escape(TABLE_DATA_ATTR)}$")),),
            "th": (AttrRule("colspan", _NUMBER), AttrRule("rowspan", _NUMBER), AttrRule("scope")),
            "td": (AttrRule("colspan", _NUMBER), AttrRule("rowspan", _NUMBER)),
            "time": (AttrRule("datetime"),),
        },
    )


SANITIZER = ugc_policy()


class _SanitizingHTMLParser(HTMLParser):
    """Streaming sanitizer that keeps allowed tags and re-escapes text."""

    def __init__(self, policy: Sanitizer) -> None:
        super().__init__(convert_charrefs=True)
        self.out: list[str] = []
        self._policy = policy
        # Name and nesting depth of the removed element being skipped
        self._skip_tag: str | None = None
        self._skip_depth = 0
        self._open: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        tag_l = tag.lower()

        if self._skip_tag is not None:
            if tag_l == self._skip_tag:
                self._skip_depth += 1
            return

        if tag_l in self._policy.remove_tags:
            if tag_l not in VOID_TAGS:
                self._skip_tag = tag_l
                self._skip_depth = 1
            return

        if tag_l not in self._policy.tags:
            # Unwrap: drop the tag, keep its content.
            return

        kept: dict[str, str] = {}
        for name, value in attrs:
            name_l = name.lower()
            value = value if value is not None else ""
            if name_l in kept:
                continue
            if self._policy.allowed_value(tag_l, name_l, value):
                kept[name_l] = value

        if tag_l == "a" and self._policy.link_rel and "href" in kept:
            kept["rel"] = self._policy.link_rel

        parts = [f'{k}="{escape(v, quote=True)}"' for k, v in kept.items()]
        attrs_rendered = (" " + " ".join(parts)) if parts else ""

        self.out.append(f"<{tag_l}{attrs_rendered}>")
        if tag_l not in VOID_TAGS:
            self._open.append(tag_l)

    def handle_endtag(self, tag: str) -> None:
        tag_l = tag.lower()

        if self._skip_tag is not None:
            if tag_l == self._skip_tag:
                self._skip_depth -= 1
                if self._skip_depth == 0:
                    self._skip_tag = None
                return
            if tag_l not in self._open:
                return
            # The parent closed first: the removed element ends here too.
            self._skip_tag = None
            self._skip_depth = 0

        if tag_l in VOID_TAGS or tag_l not in self._open:
            return

        # Close anything left open inside this element.
        while self._open:
            top = self._open.pop()
            self.out.append(f"</{top}>")
            if top == tag_l:
                break

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # Treat as start + end for non-void tags.
        self.handle_starttag(tag, attrs)
        if tag.lower() not in VOID_TAGS:
            self.handle_endtag(tag)

    def handle_data(self, data: str) -> None:
        if self._skip_tag is not None or not data:
            return
        self.out.append(escape(data, quote=False))

    def handle_comment(self, data: str) -> None:
        return

    def close(self) -> None:
        super().close()
        while self._open:
            self.out.append(f"</{self._open.pop()}>")
