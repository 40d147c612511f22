"""Command-line interface for htmlbuilder."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .build import build_document, load_page_spec
from .document import HTMLDocument
from .dom_model import StructureError
from .io_utils import write_text
from .models import DocumentSettings
from .sample_page import build_sample_document

VERSION = "0.1.0"


def _settings_from_args(args: argparse.Namespace, base: DocumentSettings) -> DocumentSettings:
    data = base.model_dump()
    if args.tab:
        data["indent"] = "tab"
    if args.indent_width is not None:
        data["indent"] = "spaces"
        data["indent_width"] = args.indent_width
    try:
        return DocumentSettings.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid indentation settings: {exc}") from exc


def _emit(document: HTMLDocument, output: Optional[str]) -> None:
    html_text = document.render()
    if output is None:
        sys.stdout.write(html_text)
        return
    path = write_text(Path(output), html_text)
    print(f"Wrote {len(html_text)} characters to {path}.")


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.is_file():
        raise SystemExit(f"Page file not found: {input_path}")

    try:
        spec = load_page_spec(input_path)
    except OSError as exc:
        raise SystemExit(f"Could not read {input_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SystemExit(f"Could not parse {input_path}: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid page description in {input_path}: {exc}") from exc

    settings = _settings_from_args(args, spec.settings)
    try:
        document = build_document(spec, indent_unit=settings.indent_unit)
    except StructureError as exc:
        raise SystemExit(f"{input_path}: {exc}") from exc
    _emit(document, args.output)


def _handle_demo(args: argparse.Namespace) -> None:
    settings = _settings_from_args(args, DocumentSettings())
    _emit(build_sample_document(settings.indent_unit), args.output)


def _add_indent_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--indent-width",
        dest="indent_width",
        type=int,
        default=None,
        help="Indent each level with this many spaces.",
    )
    group.add_argument(
        "--tab",
        action="store_true",
        help="Indent each level with a tab character.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlbuilder",
        description="Render HTML documents from node trees",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"htmlbuilder {VERSION}",
        help="Show the htmlbuilder version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a page described in YAML.",
        description="Validate a page YAML file and render it as an HTML document.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the page YAML file.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write the HTML to (default: stdout).",
    )
    _add_indent_options(render_parser)
    render_parser.set_defaults(func=_handle_render)

    demo_parser = subparsers.add_parser(
        "demo",
        help="Render the built-in example page.",
        description="Render the example page assembled with the builder API.",
    )
    demo_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write the HTML to (default: stdout).",
    )
    _add_indent_options(demo_parser)
    demo_parser.set_defaults(func=_handle_demo)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
