"""Directory listing and path helpers."""

from __future__ import annotations

import enum
import os
import shutil
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    """What a directory entry is."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"  # symlink, device, etc.


@dataclass(frozen=True)
class Entry:
    """A directory entry together with its kind."""

    kind: EntryKind
    path: Path


def _is_empty_dir(path: Path) -> bool:
    with os.scandir(path) as entries:
        return next(entries, None) is None


def list_dir_with_kind(
    path: str | os.PathLike, cull_empty_folders: bool
) -> list[Entry]:
    """List the entries of a directory, optionally dropping empty subdirectories."""
    base = Path(path)
    results: list[Entry] = []
    with os.scandir(base) as entries:
        for dir_entry in entries:
            entry_path = base / dir_entry.name
            if dir_entry.is_file(follow_symlinks=False):
                kind = EntryKind.FILE
            elif dir_entry.is_dir(follow_symlinks=False):
                if cull_empty_folders and _is_empty_dir(entry_path):
                    continue
                kind = EntryKind.DIRECTORY
            else:
                kind = EntryKind.OTHER
            results.append(Entry(kind, entry_path))
    return results


def get_top_level_dir(
    file_path: str | os.PathLike, base_dir: str | os.PathLike
) -> str | None:
    """Return the first path component of ``file_path`` below ``base_dir``.

    Returns None when ``file_path`` is ``base_dir`` itself; raises ValueError
    when ``base_dir`` is not a prefix of ``file_path``.
    """
    file_path, base_dir = Path(file_path), Path(base_dir)
    try:
        relative = file_path.relative_to(base_dir)
    except ValueError:
        raise ValueError(
            f"Base directory '{base_dir}' is not a prefix of file path '{file_path}'"
        ) from None
    return relative.parts[0] if relative.parts else None


def relative_after(path: str | os.PathLike, base: str | os.PathLike) -> Path | None:
    """Return ``path`` relative to ``base``, or None if ``base`` is not a prefix."""
    try:
        return Path(path).relative_to(base)
    except ValueError:
        return None


def relative_before(path: str | os.PathLike, base: str | os.PathLike) -> Path | None:
    """Return ``base`` joined with the first component of ``path`` below it."""
    stripped = relative_after(path, base)
    if stripped is None or not stripped.parts:
        return None
    return Path(base) / stripped.parts[0]


def clear_folder_contents(folder: str | os.PathLike) -> None:
    """Delete everything inside ``folder``; do nothing if it is not a directory."""
    folder = Path(folder)
    if not folder.is_dir():
        return
    for child in folder.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()