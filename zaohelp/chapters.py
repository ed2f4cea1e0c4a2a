"""Matroska chapter XML: parsing, writing and the mkvtoolnix round trip."""

from __future__ import annotations

import os
import subprocess
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from zaohelp.temp import create_temp_file
from zaohelp.tools import get_third_party_binary


@dataclass
class ChapterAtom:
    """One chapter: start, optional end and display title."""

    start_time: str
    title: str
    end_time: str | None = None

    def format_line(self) -> str:
        """Render the chapter as one line of a listing."""
        end = self.end_time if self.end_time is not None else "???"
        return f"Start: {self.start_time:<12} End: {end:<12} Title: {self.title}"


@dataclass
class Chapters:
    """The chapters of a single edition."""

    chapters: list[ChapterAtom] = field(default_factory=list)

    def __iter__(self) -> Iterator[ChapterAtom]:
        return iter(self.chapters)

    def __len__(self) -> int:
        return len(self.chapters)

    def append(self, chapter: ChapterAtom) -> None:
        self.chapters.append(chapter)

    def format_listing(self) -> str:
        """Render every chapter on its own newline-terminated line."""
        return "".join(chapter.format_line() + "\n" for chapter in self)


def _required_child(parent: ET.Element, tag: str) -> ET.Element:
    child = parent.find(tag)
    if child is None:
        raise ValueError(f"missing field `{tag}` in <{parent.tag}>")
    return child


def _text(element: ET.Element) -> str:
    return (element.text or "").strip()


def parse_chapter_xml(xml: str) -> Chapters:
    """Parse chapter XML as written by mkvextract."""
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise ValueError(f"invalid chapter XML: {exc}") from exc

    edition = _required_child(root, "EditionEntry")
    chapters = Chapters()
    for atom in edition.findall("ChapterAtom"):
        end = atom.find("ChapterTimeEnd")
        display = _required_child(atom, "ChapterDisplay")
        chapters.append(
            ChapterAtom(
                start_time=_text(_required_child(atom, "ChapterTimeStart")),
                title=_text(_required_child(display, "ChapterString")),
                end_time=_text(end) if end is not None else None,
            )
        )
    return chapters


def chapters_to_xml(chapters: Chapters) -> str:
    """Serialise chapters into XML that mkvpropedit accepts."""
    root = ET.Element("Chapters")
    edition = ET.SubElement(root, "EditionEntry")
    for chapter in chapters:
        atom = ET.SubElement(edition, "ChapterAtom")
        ET.SubElement(atom, "ChapterTimeStart").text = chapter.start_time
        if chapter.end_time is not None:
            ET.SubElement(atom, "ChapterTimeEnd").text = chapter.end_time
        display = ET.SubElement(atom, "ChapterDisplay")
        ET.SubElement(display, "ChapterString").text = chapter.title
    return '<?xml version="1.0"?>\n' + ET.tostring(root, encoding="unicode")


def extract_chapters(mkv_file_path: str | os.PathLike) -> Chapters:
    """Run mkvextract on a file and parse the chapters it writes."""
    temp_dir, xml_path = create_temp_file("chapters.xml")
    with temp_dir:
        xml_path.unlink(missing_ok=True)
        tool = get_third_party_binary("mkvextract.exe")
        result = subprocess.run(
            [str(tool), str(mkv_file_path), "chapters", str(xml_path)]
        )
        if result.returncode != 0:
            raise RuntimeError(f"Failed to extract chapters from {mkv_file_path}")
        if xml_path.stat().st_size == 0:
            raise RuntimeError(f"Chapters not found in {mkv_file_path}")
        return parse_chapter_xml(xml_path.read_text(encoding="utf-8"))


def read_chapters_from_mkv(mkv_file: str | os.PathLike) -> Chapters:
    """Read the chapters of a Matroska file."""
    return extract_chapters(mkv_file)


def add_chapter_to_mkv(mkv_file: str | os.PathLike, timestamp: str, title: str) -> None:
    """Append a chapter to a Matroska file in place."""
    chapters = extract_chapters(mkv_file)
    chapters.append(ChapterAtom(start_time=timestamp, title=title))
    xml_output = chapters_to_xml(chapters)

    temp_dir, xml_path = create_temp_file("add_chapter_to_mkv_chapters.xml")
    with temp_dir:
        Path(xml_path).write_text(xml_output, encoding="utf-8")
        tool = get_third_party_binary("mkvpropedit.exe")
        result = subprocess.run(
            [str(tool), str(mkv_file), "--chapters", str(xml_path)]
        )
        if result.returncode != 0:
            raise RuntimeError("Failed to apply chapters with mkvpropedit")