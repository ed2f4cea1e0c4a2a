"""Command line entry point: dump chapter listings of chaptered series."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from zaohelp.fileops import Entry, EntryKind, clear_folder_contents, list_dir_with_kind
from zaohelp.scan import process_mkv_file, split_by_chapters

DEFAULT_SOURCE = Path("test") / "test_Source"
DEFAULT_OUTPUT = Path("output")


def _names(entries: Sequence[Entry]) -> str:
    return json.dumps([entry.path.stem for entry in entries], ensure_ascii=False)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zaohelper",
        description="Split series by whether they carry chapters and write "
        "chapter listings for those that do.",
    )
    parser.add_argument(
        "source", nargs="?", type=Path, default=DEFAULT_SOURCE,
        help="directory holding the series (default: %(default)s)",
    )
    parser.add_argument(
        "output", nargs="?", type=Path, default=DEFAULT_OUTPUT,
        help="directory the listings are written to; it is emptied first "
        "(default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool; return the process exit status."""
    args = _build_parser().parse_args(argv)
    source: Path = args.source
    output: Path = args.output

    try:
        entries = list_dir_with_kind(source, True)
        with_chapters, without_chapters = split_by_chapters(entries, True)
    except OSError as exc:
        print(f"failed: {exc}", file=sys.stderr)
        return 1

    print(f"With chapters: {_names(with_chapters)}")
    print(f"Without chapters: {_names(without_chapters)}")

    try:
        clear_folder_contents(output)
    except OSError as exc:
        print(f"Could not clear: {exc}", file=sys.stderr)
        return 1

    stack = list(with_chapters)
    while stack:
        item = stack.pop()
        if item.kind is EntryKind.FILE:
            try:
                process_mkv_file(item, source, output)
            except (OSError, ValueError, RuntimeError) as exc:
                print(exc)
        elif item.kind is EntryKind.DIRECTORY:
            try:
                stack.extend(list_dir_with_kind(item.path, True))
            except OSError as exc:
                print(repr(exc))
        else:
            print(f"Skipping unsupported entry: {item.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())