"""Command-line interface for htmlbuilder."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .document import ElementSpec, load_document, render_document
from .io_utils import warn, write_html


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    document = load_document(input_path)
    if not isinstance(document.root, ElementSpec):
        warn(f"{input_path}: root is a {document.root.kind} node, not an element.")

    output = render_document(document, doctype=args.doctype)
    if args.output:
        write_html(Path(args.output), output)
    else:
        sys.stdout.write(output + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="htmlbuilder command-line tools")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML tree document to HTML.",
        description="Build the node tree described by a YAML document and serialize it.",
    )
    render_parser.add_argument("input", help="Path to the YAML tree document.")
    render_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="File to write the HTML to (defaults to stdout).",
    )
    render_parser.add_argument(
        "--doctype",
        action="store_true",
        help="Prefix the output with <!doctype html>.",
    )
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
