import subprocess
from pathlib import Path
from unittest import mock

import pytest

from zaohelp.chapters import (
    ChapterAtom,
    Chapters,
    add_chapter_to_mkv,
    chapters_to_xml,
    extract_chapters,
    parse_chapter_xml,
    read_chapters_from_mkv,
)

SAMPLE_XML = """<?xml version="1.0"?>
<Chapters>
  <EditionEntry>
    <EditionUID>1</EditionUID>
    <ChapterAtom>
      <ChapterUID>11</ChapterUID>
      <ChapterTimeStart>00:00:00.000000000</ChapterTimeStart>
      <ChapterTimeEnd>00:01:30.000000000</ChapterTimeEnd>
      <ChapterDisplay>
        <ChapterString>Opening</ChapterString>
        <ChapterLanguage>eng</ChapterLanguage>
      </ChapterDisplay>
    </ChapterAtom>
    <ChapterAtom>
      <ChapterTimeStart>00:01:30.000000000</ChapterTimeStart>
      <ChapterDisplay>
        <ChapterString>Part A</ChapterString>
      </ChapterDisplay>
    </ChapterAtom>
  </EditionEntry>
</Chapters>
"""


def test_parse_sample():
    chapters = parse_chapter_xml(SAMPLE_XML)
    assert list(chapters) == [
        ChapterAtom("00:00:00.000000000", "Opening", "00:01:30.000000000"),
        ChapterAtom("00:01:30.000000000", "Part A", None),
    ]
    assert len(chapters) == 2


def test_parse_edition_without_chapters_is_empty():
    chapters = parse_chapter_xml("<Chapters><EditionEntry/></Chapters>")
    assert len(chapters) == 0
    assert chapters.format_listing() == ""


def test_parse_missing_edition_raises():
    with pytest.raises(ValueError, match="EditionEntry"):
        parse_chapter_xml("<Chapters></Chapters>")


def test_parse_missing_start_raises():
    xml = (
        "<Chapters><EditionEntry><ChapterAtom><ChapterDisplay>"
        "<ChapterString>t</ChapterString></ChapterDisplay>"
        "</ChapterAtom></EditionEntry></Chapters>"
    )
    with pytest.raises(ValueError, match="ChapterTimeStart"):
        parse_chapter_xml(xml)


def test_parse_malformed_raises():
    with pytest.raises(ValueError):
        parse_chapter_xml("<Chapters><EditionEntry>")


def test_format_line_pads_and_marks_missing_end():
    atom = ChapterAtom("00:00:00.000", "Intro")
    assert atom.format_line() == "Start: 00:00:00.000 End: ???          Title: Intro"


def test_format_listing_one_line_per_chapter():
    chapters = parse_chapter_xml(SAMPLE_XML)
    lines = chapters.format_listing().splitlines()
    assert lines == [c.format_line() for c in chapters]
    assert lines[1].endswith("Title: Part A")


def test_xml_round_trip():
    chapters = parse_chapter_xml(SAMPLE_XML)
    xml = chapters_to_xml(chapters)
    assert xml.startswith('<?xml version="1.0"?>\n<Chapters>')
    assert parse_chapter_xml(xml) == chapters


def test_append_adds_to_end():
    chapters = Chapters()
    chapters.append(ChapterAtom("00:00:05.000", "New"))
    assert [c.title for c in chapters] == ["New"]


def _fake_extract(xml_text, returncode=0):
    def run(args, *a, **kw):
        Path(args[3]).write_text(xml_text, encoding="utf-8")
        return subprocess.CompletedProcess(args, returncode)

    return run


def test_extract_chapters_parses_tool_output():
    with mock.patch("subprocess.run", side_effect=_fake_extract(SAMPLE_XML)) as run:
        chapters = extract_chapters("video.mkv")
    args = run.call_args.args[0]
    assert args[1:3] == ["video.mkv", "chapters"]
    assert Path(args[0]).name == "mkvextract.exe"
    assert chapters == parse_chapter_xml(SAMPLE_XML)


def test_read_chapters_from_mkv_matches_extract():
    with mock.patch("subprocess.run", side_effect=_fake_extract(SAMPLE_XML)):
        chapters = read_chapters_from_mkv("video.mkv")
    assert [c.title for c in chapters] == ["Opening", "Part A"]


def test_extract_chapters_tool_failure():
    with mock.patch("subprocess.run", side_effect=_fake_extract("", returncode=2)):
        with pytest.raises(RuntimeError, match="Failed to extract chapters from video.mkv"):
            extract_chapters("video.mkv")


def test_extract_chapters_empty_output():
    with mock.patch("subprocess.run", side_effect=_fake_extract("")):
        with pytest.raises(RuntimeError, match="Chapters not found in video.mkv"):
            extract_chapters("video.mkv")


def test_add_chapter_to_mkv_writes_extended_chapters():
    written = {}

    def run(args, *a, **kw):
        if args[2] == "chapters":
            Path(args[3]).write_text(SAMPLE_XML, encoding="utf-8")
        else:
            written["args"] = args
            written["xml"] = Path(args[3]).read_text(encoding="utf-8")
        return subprocess.CompletedProcess(args, 0)

    with mock.patch("subprocess.run", side_effect=run):
        add_chapter_to_mkv("video.mkv", "00:02:00.000", "Ending")

    assert written["args"][1:3] == ["video.mkv", "--chapters"]
    result = parse_chapter_xml(written["xml"])
    assert len(result) == 3
    assert list(result)[-1] == ChapterAtom("00:02:00.000", "Ending", None)


def test_add_chapter_to_mkv_propedit_failure():
    def run(args, *a, **kw):
        if args[2] == "chapters":
            Path(args[3]).write_text(SAMPLE_XML, encoding="utf-8")
            return subprocess.CompletedProcess(args, 0)
        return subprocess.CompletedProcess(args, 1)

    with mock.patch("subprocess.run", side_effect=run):
        with pytest.raises(RuntimeError, match="mkvpropedit"):
            add_chapter_to_mkv("video.mkv", "00:02:00.000", "Ending")