"""Locations of bundled third-party tools."""

from __future__ import annotations

from pathlib import Path

_BASE_DIR = Path(__file__).resolve().parent


def get_third_party_binary(name: str) -> Path:
    """Return the path of a bundled tool under ``third_party/bin``."""
    return _BASE_DIR / "third_party" / "bin" / name