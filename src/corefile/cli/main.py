"""CLI entrypoint for corefile."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from corefile import __version__
from corefile.cli.handlers import (
    handle_cat,
    handle_copy,
    handle_exists,
    handle_lines,
    handle_move,
    handle_rm,
    handle_size,
    handle_stat,
    handle_touch,
    handle_write,
)
from corefile.config import CoreFileConfig, load_config
from corefile.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from corefile.exceptions import ConfigError, CoreFileError

Handler = Callable[[argparse.Namespace, CoreFileConfig], int]

HANDLERS: dict[str, Handler] = {
    "cat": handle_cat,
    "lines": handle_lines,
    "write": handle_write,
    "copy": handle_copy,
    "move": handle_move,
    "rm": handle_rm,
    "exists": handle_exists,
    "size": handle_size,
    "stat": handle_stat,
    "touch": handle_touch,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file operation")
    subparsers = parser.add_subparsers(dest="command", required=True)

    cat = subparsers.add_parser("cat", help="Print the contents of a file")
    cat.add_argument("path", type=Path)
    cat.add_argument("--bytes", action="store_true", help="Write raw bytes instead of decoded text")

    lines = subparsers.add_parser("lines", help="Print the numbered lines of a file")
    lines.add_argument("path", type=Path)

    write = subparsers.add_parser("write", help="Write stdin (or --text) to a file")
    write.add_argument("path", type=Path)
    write.add_argument("-a", "--append", action="store_true", help="Append instead of truncating")
    write.add_argument("-t", "--text", default=None, help="Text to write instead of reading stdin")

    for name, verb in (("copy", "Copy"), ("move", "Move")):
        sub = subparsers.add_parser(name, help=f"{verb} a file")
        sub.add_argument("src", type=Path)
        sub.add_argument("dst", type=Path)
        sub.add_argument("-f", "--overwrite", action="store_true", help="Replace an existing destination")

    rm = subparsers.add_parser("rm", help="Delete a file")
    rm.add_argument("path", type=Path)
    rm.add_argument("--missing-ok", action="store_true", help="Succeed when the file does not exist")

    exists = subparsers.add_parser("exists", help="Exit 0 if a regular file exists, 1 otherwise")
    exists.add_argument("path", type=Path)

    size = subparsers.add_parser("size", help="Print the size of a file in bytes")
    size.add_argument("path", type=Path)

    stat = subparsers.add_parser("stat", help="Print size and timestamps of a file")
    stat.add_argument("path", type=Path)
    stat.add_argument("--utc", action="store_true", help="Report timestamps in UTC")
    stat.add_argument("--json", action="store_true", help="Emit JSON instead of text")

    touch = subparsers.add_parser("touch", help="Create a file if needed and set its access and write times")
    touch.add_argument("path", type=Path)
    touch.add_argument(
        "--time",
        type=datetime.fromisoformat,
        default=None,
        help="ISO 8601 timestamp to apply (default: now)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(Path.cwd(), args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args, config)
    except CoreFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except UnicodeError as exc:
        print(f"Encoding error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
