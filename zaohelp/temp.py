"""Temporary files and directories that live as long as their handle."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def _file_name(source: str | os.PathLike) -> str:
    name = Path(source).name
    if not name or name == "..":
        raise ValueError("Invalid source filename")
    return name


def create_temp_file(
    source: str | os.PathLike,
) -> tuple[tempfile.TemporaryDirectory, Path]:
    """Reserve a path named like ``source`` inside a fresh temporary directory.

    The file itself is not created. The directory and everything in it is
    removed when the returned ``TemporaryDirectory`` is cleaned up.
    """
    name = _file_name(source)
    temp_dir = tempfile.TemporaryDirectory()
    return temp_dir, Path(temp_dir.name) / name


def copy_to_temp(
    source: str | os.PathLike,
) -> tuple[tempfile.TemporaryDirectory, Path]:
    """Copy a file or a directory tree into a fresh temporary directory.

    Returns the temporary directory handle and the path of the copy.
    """
    source = Path(source)
    name = _file_name(source)
    temp_dir = tempfile.TemporaryDirectory()
    destination = Path(temp_dir.name) / name
    try:
        if source.is_file():
            shutil.copy(source, destination)
        else:
            _copy_dir_recursive(source, destination)
    except BaseException:
        temp_dir.cleanup()
        raise
    return temp_dir, destination


def _copy_dir_recursive(src: Path, dst: Path) -> None:
    """Copy regular files and directories below ``src``; skip everything else."""
    dst.mkdir(parents=True, exist_ok=True)
    with os.scandir(src) as entries:
        for entry in entries:
            target = dst / entry.name
            if entry.is_dir(follow_symlinks=False):
                _copy_dir_recursive(Path(entry.path), target)
            elif entry.is_file(follow_symlinks=False):
                shutil.copy(entry.path, target)