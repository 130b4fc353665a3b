"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time

from corefile.config import CoreFileConfig
from corefile.file import (
    append_all_text,
    copy,
    create,
    delete,
    exists,
    get_creation_time,
    get_creation_time_utc,
    get_last_access_time,
    get_last_access_time_utc,
    get_last_write_time,
    get_last_write_time_utc,
    get_size,
    move,
    read_all_bytes,
    read_all_lines,
    read_all_text,
    set_last_access_time,
    set_last_write_time,
    write_all_text,
)

logger = logging.getLogger(__name__)


def handle_cat(args: argparse.Namespace, config: CoreFileConfig) -> int:
    if args.bytes:
        _write_stdout_bytes(read_all_bytes(args.path))
    else:
        _write_stdout_text(read_all_text(args.path, config=config), config)
    return 0


def handle_lines(args: argparse.Namespace, config: CoreFileConfig) -> int:
    numbered = enumerate(read_all_lines(args.path, config=config), start=1)
    _write_stdout_text("".join(f"{number:>6}  {line}\n" for number, line in numbered), config)
    return 0


def handle_write(args: argparse.Namespace, config: CoreFileConfig) -> int:
    contents = args.text if args.text is not None else sys.stdin.read()
    if args.append:
        append_all_text(args.path, contents, config=config)
    else:
        write_all_text(args.path, contents, config=config)
    return 0


def handle_copy(args: argparse.Namespace, config: CoreFileConfig) -> int:
    copy(args.src, args.dst, overwrite=args.overwrite, config=config)
    logger.info("Copied %s to %s", args.src, args.dst)
    return 0


def handle_move(args: argparse.Namespace, config: CoreFileConfig) -> int:
    move(args.src, args.dst, overwrite=args.overwrite, config=config)
    logger.info("Moved %s to %s", args.src, args.dst)
    return 0


def handle_rm(args: argparse.Namespace, config: CoreFileConfig) -> int:
    delete(args.path, missing_ok=args.missing_ok)
    return 0


def handle_exists(args: argparse.Namespace, config: CoreFileConfig) -> int:
    return 0 if exists(args.path) else 1


def handle_size(args: argparse.Namespace, config: CoreFileConfig) -> int:
    print(get_size(args.path))
    return 0


def handle_stat(args: argparse.Namespace, config: CoreFileConfig) -> int:
    """Report size and timestamps as aligned text or JSON."""
    if args.utc:
        created, accessed, written = (
            get_creation_time_utc(args.path),
            get_last_access_time_utc(args.path),
            get_last_write_time_utc(args.path),
        )
    else:
        created, accessed, written = (
            get_creation_time(args.path),
            get_last_access_time(args.path),
            get_last_write_time(args.path),
        )
    report = {
        "path": str(args.path),
        "size": get_size(args.path),
        "utc": args.utc,
        "creation_time": created.isoformat(),
        "last_access_time": accessed.isoformat(),
        "last_write_time": written.isoformat(),
    }

    if args.json:
        print(json.dumps(report, indent=2, sort_keys=True))
        return 0

    width = max(len(key) for key in report)
    for key, value in report.items():
        print(f"{key:<{width}}  {value}")
    return 0


def handle_touch(args: argparse.Namespace, config: CoreFileConfig) -> int:
    if not exists(args.path):
        create(args.path).close()
    moment = args.time if args.time is not None else time.time()
    set_last_access_time(args.path, moment)
    set_last_write_time(args.path, moment)
    return 0


def _write_stdout_text(text: str, config: CoreFileConfig) -> None:
    """Encode with the file codec so undecodable bytes go back out unchanged."""
    _write_stdout_bytes(text.encode(config.encoding, config.errors))


def _write_stdout_bytes(payload: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()
