"""Sorting Matroska files by whether they carry chapters, and dumping them."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from zaohelp.chapters import Chapters, read_chapters_from_mkv
from zaohelp.fileops import Entry, EntryKind, get_top_level_dir, list_dir_with_kind
from zaohelp.temp import copy_to_temp


@dataclass
class MkvMetadata:
    """What was learned about one Matroska file."""

    path: Path
    chapters: Chapters
    duration: float


def split_by_chapters(
    entries: Iterable[Entry], cull_empty_folders: bool
) -> tuple[list[Entry], list[Entry]]:
    """Partition entries into those with chapters and those without.

    A file counts when it is a Matroska file with at least one chapter; a
    directory counts when every file below it (text files aside) does.
    Entries that are neither files nor directories are dropped.
    """
    with_chapters: list[Entry] = []
    without_chapters: list[Entry] = []

    for entry in entries:
        if entry.kind is EntryKind.FILE:
            matched = has_chapters(entry.path)
        elif entry.kind is EntryKind.DIRECTORY:
            matched = all_files_have_chapters(entry.path, cull_empty_folders)
        else:
            continue
        (with_chapters if matched else without_chapters).append(entry)

    print(
        f"With Chapters: {len(with_chapters)}\n"
        f"Without Chapters: {len(without_chapters)}"
    )
    return with_chapters, without_chapters


def all_files_have_chapters(
    dir_path: str | os.PathLike, cull_empty_folders: bool
) -> bool:
    """Tell whether every non-text file below ``dir_path`` has chapters."""
    for entry in list_dir_with_kind(dir_path, cull_empty_folders):
        if entry.kind is EntryKind.FILE:
            if entry.path.suffix == ".txt":
                continue
            if not has_chapters(entry.path):
                return False
        elif entry.kind is EntryKind.DIRECTORY:
            if not all_files_have_chapters(entry.path, cull_empty_folders):
                return False
    return True


def has_chapters(path: str | os.PathLike) -> bool:
    """Tell whether ``path`` is a Matroska file with at least one chapter.

    The file is read from a temporary copy. Failing to read chapters counts
    as having none; failing to make the copy is an error.
    """
    path = Path(path)
    if path.suffix != ".mkv":
        return False

    temp_dir, copy_path = copy_to_temp(path)
    with temp_dir:
        try:
            chapters = read_chapters_from_mkv(copy_path)
        except Exception:
            return False
        return len(chapters) > 0


def process_mkv_file(
    entry: Entry, base_dir: str | os.PathLike, output_dir: str | os.PathLike
) -> MkvMetadata:
    """Write a chapter listing for one Matroska file below ``output_dir``.

    The listing goes to ``<output_dir>/<top-level dir>/<stem>.chapters.txt``,
    where the top-level directory is the first component of the file's path
    below ``base_dir``.
    """
    if entry.kind is not EntryKind.FILE:
        raise ValueError("Only processes files")

    path = entry.path
    if path.suffix != ".mkv":
        raise ValueError(f"Only .mkv supported for now, {path}")

    metadata = MkvMetadata(
        path=path, chapters=read_chapters_from_mkv(path), duration=20.0
    )

    top_level_dir = get_top_level_dir(path, base_dir)
    if top_level_dir is None:
        raise ValueError("File is directly in base_dir without subdirectory")

    output_path = (Path(output_dir) / top_level_dir / path.name).with_suffix(
        ".chapters.txt"
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_path.exists():
        print(
            "Warning: Output file already exists and will be overwritten: "
            f"{output_path}",
            file=sys.stderr,
        )

    output_path.write_text(metadata.chapters.format_listing(), encoding="utf-8")
    print(f"Wrote: {output_path}")
    return metadata