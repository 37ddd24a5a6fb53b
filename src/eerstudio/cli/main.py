# Copyright 2026 EER Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the EER Studio command-line interface."""

import argparse
import math
import sys
from pathlib import Path

from eerstudio.compiler.artifact import serialize, write_artifact
from eerstudio.compiler.builder import build_model
from eerstudio.model.entities import DiagramModel
from eerstudio.samples import DOCUMENT_SUFFIX, SAMPLE_DOCUMENT
from eerstudio.settings.config import SETTINGS_FILE_NAME, Settings, SettingsError, default_settings, load_settings
from eerstudio.settings.logging import get_logger, setup_logging
from eerstudio.sync.writeback import move_node
from eerstudio.validation.checks import validate

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the EER Studio CLI."""
    parser = argparse.ArgumentParser(
        prog="eerstudio",
        description="EER Studio: text-defined EER diagrams",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Settings file (default: {SETTINGS_FILE_NAME} next to the document, if present)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level: DEBUG, INFO, WARNING, ERROR (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # new subcommand
    new_parser = subparsers.add_parser(
        "new",
        help="Create a document from the bundled example",
        description="Write the example EER document to a new file.",
    )
    new_parser.add_argument("file", type=Path, help=f"Document to create (suffix {DOCUMENT_SUFFIX} recommended)")
    new_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Print the diagram model of a document as JSON",
        description="Parse a document and emit its nodes and links as JSON.",
    )
    parse_parser.add_argument("file", type=Path, help="Document to parse")
    parse_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the JSON to this file instead of standard output",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report lines and links that have no effect on the diagram",
        description="Parse a document and report ignored lines, dangling links and detached nodes.",
    )
    check_parser.add_argument("file", type=Path, help="Document to check")

    # move subcommand
    move_parser = subparsers.add_parser(
        "move",
        help="Set the position of a node in the document",
        description="Rewrite the coordinates on the line that declares NODE_ID.",
    )
    move_parser.add_argument("file", type=Path, help="Document to edit in place")
    move_parser.add_argument("node_id", help="Id of the node to move")
    move_parser.add_argument("x", type=float, help="New x position")
    move_parser.add_argument("y", type=float, help="New y position")

    args = parser.parse_args()
    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "new":
        return _cmd_new(args)
    if args.command == "parse":
        return _cmd_parse(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "move":
        return _cmd_move(args)
    return 0


def _cmd_new(args: argparse.Namespace) -> int:
    """Handle the new subcommand."""
    path: Path = args.file
    if path.exists() and not args.force:
        print(f"Error: '{path}' already exists. Use --force to overwrite it.", file=sys.stderr)
        return 1
    if not path.parent.exists():
        print(f"Error: directory '{path.parent}' does not exist.", file=sys.stderr)
        return 1

    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    print(f"Created '{path}'.")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    model = _load_model(args)
    if model is None:
        return 1

    if args.output is None:
        print(serialize(model))
        return 0

    write_artifact(model, args.output)
    print(f"Wrote {len(model.nodes)} node(s) and {len(model.links)} link(s) to '{args.output}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    model = _load_model(args)
    if model is None:
        return 1

    result = validate(model)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    if not result.has_warnings:
        print("No issues found.")
    return 0


def _cmd_move(args: argparse.Namespace) -> int:
    """Handle the move subcommand."""
    if not (math.isfinite(args.x) and math.isfinite(args.y)):
        print(f"Error: position ({args.x}, {args.y}) must be finite.", file=sys.stderr)
        return 1
    text = _read_document(args.file)
    if text is None:
        return 1
    settings = _load_settings(args)
    if settings is None:
        return 1

    model = build_model(text, settings.layout)
    node = model.find_node(args.node_id)
    if node is None:
        print(f"Error: no node with id '{args.node_id}' in '{args.file}'.", file=sys.stderr)
        return 1

    updated = move_node(text, model, args.node_id, args.x, args.y)
    args.file.write_text(updated, encoding="utf-8", newline="")
    logger.info("Moved '%s' on line %d of %s", node.id, node.origin_line + 1, args.file)
    print(f"Moved '{node.id}' (line {node.origin_line + 1}).")
    return 0


def _load_model(args: argparse.Namespace) -> DiagramModel | None:
    """Read and parse the document named by ``args.file``; None on error."""
    text = _read_document(args.file)
    if text is None:
        return None
    settings = _load_settings(args)
    if settings is None:
        return None
    return build_model(text, settings.layout)


def _read_document(path: Path) -> str | None:
    """Return the document text, or print an error and return None."""
    if not path.is_file():
        print(f"Error: document '{path}' does not exist.", file=sys.stderr)
        return None
    try:
        # Keep "\r\n" intact so write-back leaves other lines untouched.
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None


def _load_settings(args: argparse.Namespace) -> Settings | None:
    """Load settings from ``--config`` or the document's directory; None on error."""
    config_path: Path | None = args.config
    if config_path is None:
        candidate = args.file.parent / SETTINGS_FILE_NAME
        if not candidate.is_file():
            return default_settings()
        config_path = candidate

    try:
        return load_settings(config_path)
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
