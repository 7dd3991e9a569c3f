"""
Command-line interface for pdfblocks.

Usage:
    pdfblocks render tree.json --output out.pdf
    pdfblocks info tree.json
    pdfblocks validate tree.json
    pdfblocks version
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .engine.geometry import resolve_page_geometry
from .engine.layout_engine import compute_layout
from .engine.layout_validator import LayoutValidator
from .engine.pdf.generator import GeneratorConfig, generate_pdf_file
from .exceptions import ParsingError, RenderingError
from .tree.serializer import pdf_tree_from_string
from .utils.logger import LOG_LEVELS, configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pdfblocks",
        description="pdfblocks - render JSON block trees to PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdfblocks render invoice.json --output invoice.pdf
  pdfblocks info invoice.json --json
  pdfblocks validate invoice.json
  pdfblocks version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a JSON tree to PDF")
    render_parser.add_argument("input", help="Input JSON tree")
    render_parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: input name with .pdf extension)",
    )
    render_parser.add_argument(
        "--invariant",
        action="store_true",
        help="Produce byte-identical output for identical input",
    )

    info_parser = subparsers.add_parser("info", help="Show tree information")
    info_parser.add_argument("input", help="Input JSON tree")
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    validate_parser = subparsers.add_parser("validate", help="Check block geometry against the page")
    validate_parser.add_argument("input", help="Input JSON tree")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _load_tree(path_arg: str):
    input_path = Path(path_arg)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return None, 1
    try:
        return pdf_tree_from_string(input_path.read_text(encoding="utf-8")), 0
    except ParsingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None, 2


def cmd_render(args) -> int:
    """Handle render command."""
    tree, status = _load_tree(args.input)
    if tree is None:
        return status

    output_path = Path(args.output) if args.output else Path(args.input).with_suffix(".pdf")
    config = GeneratorConfig(invariant=args.invariant)
    try:
        generate_pdf_file(tree, output_path, config)
    except RenderingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3

    print(f"Saved: {output_path}")
    return 0


def cmd_info(args) -> int:
    """Handle info command."""
    tree, status = _load_tree(args.input)
    if tree is None:
        return status

    geometry = resolve_page_geometry(tree.pages[0] if tree.pages else None)
    types = {}
    for element in tree.elements:
        types[element.type] = types.get(element.type, 0) + 1

    info = {
        "file": args.input,
        "page": {"width": round(geometry.width, 2), "height": round(geometry.height, 2)},
        "pages": len(tree.pages),
        "elements": len(tree.elements),
        "types": types,
        "metadata": tree.metadata.to_dict(),
    }

    if args.json:
        print(json.dumps(info, indent=2, ensure_ascii=False))
    else:
        print(f"File: {args.input}")
        print(f"   Page: {info['page']['width']} x {info['page']['height']} pt")
        print(f"   Elements: {info['elements']}")
        for block_type, count in types.items():
            print(f"      {block_type}: {count}")
        if info["metadata"]:
            print("Metadata:")
            for key, value in info["metadata"].items():
                print(f"   {key}: {value}")
    return 0


def cmd_validate(args) -> int:
    """Handle validate command."""
    tree, status = _load_tree(args.input)
    if tree is None:
        return status

    geometry = resolve_page_geometry(tree.pages[0] if tree.pages else None)
    boxes = [
        box.offset(geometry.margins.left, geometry.margins.top)
        for box in compute_layout(tree.elements, geometry.content_width)
    ]
    is_valid, errors, warnings = LayoutValidator(boxes, geometry.width, geometry.height).validate()

    for message in errors:
        print(f"error: {message}")
    for message in warnings:
        print(f"warning: {message}")
    print(f"{len(boxes)} boxes, {len(errors)} errors, {len(warnings)} warnings")
    return 0 if is_valid else 1


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"pdfblocks v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "info":
        return cmd_info(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
