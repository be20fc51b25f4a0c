"""CLI entry point for yamltable."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import API_HOST, API_PORT, LOG_LEVEL


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yamltable",
        description="Render YAML metadata and TSV files as HTML tables.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"yamltable {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_render = sub.add_parser("render", help="Render a YAML file as HTML tables")
    p_render.add_argument("file", help="YAML file, or - for stdin")
    p_render.add_argument("--out", "-o", type=Path, help="Write HTML here instead of stdout")
    p_render.add_argument("--raw", action="store_true", help="Skip sanitization")
    p_render.add_argument(
        "--front-matter",
        action="store_true",
        help="Render the YAML front matter of a Markdown file",
    )

    p_tsv = sub.add_parser("tsv", help="Render a TSV file as an HTML table")
    p_tsv.add_argument("file", help="TSV file, or - for stdin")
    p_tsv.add_argument("--out", "-o", type=Path, help="Write HTML here instead of stdout")

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=API_HOST, help="Bind address")
    p_serve.add_argument("--port", type=int, default=API_PORT, help="Port")

    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "render":
        return _cmd_render(args)
    if args.cmd == "tsv":
        return _cmd_tsv(args)
    if args.cmd == "serve":
        return _cmd_serve(args)

    parser.print_help()
    return 2


def _cmd_render(args: Any) -> int:
    from .document.front_matter import split_front_matter
    from .errors import YamlTableError
    from .render.pipeline import render, render_sanitized

    try:
        data = _read_input(args.file)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.front_matter:
        front_matter, body = split_front_matter(data)
        if body == data:
            print("Error: no front matter found", file=sys.stderr)
            return 1
        data = front_matter

    try:
        html = render(data) if args.raw else render_sanitized(data)
    except YamlTableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _write_output(html, args.out)


def _cmd_tsv(args: Any) -> int:
    from .tsv.render import render_tsv_sanitized

    try:
        data = _read_input(args.file)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _write_output(render_tsv_sanitized(data), args.out)


def _cmd_serve(args: Any) -> int:
    from .api.app import main as serve

    serve(host=args.host, port=int(args.port))
    return 0


def _read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def _write_output(html: bytes, out: Path | None) -> int:
    if out is None:
        sys.stdout.write(html.decode("utf-8"))
        if html:
            sys.stdout.write("\n")
        return 0

    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(html)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"✓ Wrote {out}")
    return 0


if __name__ == "__main__":
    app()
