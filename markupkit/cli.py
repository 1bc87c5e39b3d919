"""Command-line interface for markupkit."""

import argparse
import json
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .blocks import BLOCK_TYPES, heading_level, unsafe_theme_keys
from .config import RenderSettings, load_settings
from .io_utils import read_document, warn, write_text
from .page import PageSpec, render_page


def _load_page(path: Path) -> PageSpec:
    if not path.exists():
        raise SystemExit(f"Page document not found: {path}")
    try:
        data = read_document(path) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping at the top level.")
    try:
        return PageSpec.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid page document in {path}: {exc}") from exc


def _load_settings(path: Optional[str]) -> RenderSettings:
    if not path:
        return RenderSettings()
    settings_path = Path(path)
    try:
        return load_settings(settings_path)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid settings in {settings_path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    page = _load_page(Path(args.page))
    settings = _load_settings(args.settings)
    try:
        html = render_page(page, settings)
    except ValueError as exc:
        raise SystemExit(f"Cannot render {args.page}: {exc}") from exc
    output_path = write_text(Path(args.out), html)
    print(f"Rendered {len(page.blocks)} blocks to {output_path}")


def _handle_validate(args: argparse.Namespace) -> None:
    page_path = Path(args.page)
    page = _load_page(page_path)

    errors: list[str] = []
    ids: set[str] = set()
    for index, block in enumerate(page.blocks, start=1):
        block_id = block.get("id")
        btype = block.get("type")
        if btype is None:
            errors.append(f"{page_path} block {index}: missing 'type'")
        elif btype not in BLOCK_TYPES:
            errors.append(f"{page_path} block {index}: unknown type '{btype}'")
        elif btype == "Heading" and heading_level(block.get("level", 1)) is None:
            errors.append(
                f"{page_path} block {index}: invalid heading level {block.get('level')!r}"
            )
        if block_id is None:
            continue
        if block_id in ids:
            errors.append(f"{page_path} block {index}: duplicate id '{block_id}'")
        ids.add(block_id)

    for index, block in enumerate(page.blocks, start=1):
        if block.get("type") != "Section":
            continue
        for child_id in block.get("children", []):
            if child_id not in ids:
                errors.append(
                    f"{page_path} block {index}: section child '{child_id}' not found"
                )

    for key in unsafe_theme_keys(page.theme):
        errors.append(f"{page_path} theme: unsafe value for '{key}'")

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    print(f"Validated page '{page.title}' with {len(page.blocks)} blocks.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render page documents with the markupkit node engine."
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a page document to HTML.",
        description="Build the node tree for a page document and write it as HTML.",
    )
    render_parser.add_argument(
        "--page",
        required=True,
        help="Path to the page document (YAML or JSON).",
    )
    render_parser.add_argument(
        "--out",
        required=True,
        help="Path of the HTML file to write.",
    )
    render_parser.add_argument(
        "--settings",
        default=None,
        help="Optional render settings YAML.",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a page document.",
        description="Check the page schema, block types, and section references.",
    )
    validate_parser.add_argument(
        "--page",
        required=True,
        help="Path to the page document (YAML or JSON).",
    )
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
