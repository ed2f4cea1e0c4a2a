# zaohelp

Tools for sorting a library of Matroska (`.mkv`) videos by whether they carry
chapter markers. The tools also write a plain-text chapter listing for every
episode that has chapters.

Chapter data is read and written with the MKVToolNix programs `mkvextract.exe`
and `mkvpropedit.exe`. They are not shipped with the package. They must be
placed in a `third_party/bin` folder inside the installed `zaohelp` package
directory. `zaohelp.tools.get_third_party_binary(name)` returns that location.

## Installation

```
pip install .
```

## Command line

```
zaohelper [source] [output]
```

- `source` is the folder that holds the series. The default is
  `test/test_Source`.
- `output` is the folder the listings are written to. The default is `output`.
  Everything inside `output` is deleted before any listing is written.

The command lists `source` and skips empty folders. It sorts the entries into
two groups:

- an `.mkv` file with at least one chapter, or a folder where every file below
  it has chapters (`.txt` files are ignored);
- everything else.

It prints the size of each group and then the names of the entries in each
group. The names are printed without extensions, as JSON lists.

For every `.mkv` file inside the first group it writes
`<output>/<series>/<episode>.chapters.txt`. `<series>` is the first folder
below `source` on the path to the file. Each chapter gets one line:

```
Start: 00:00:00.000000000 End: ???          Title: Opening
```

`???` appears when a chapter has no end time. When a listing file already
exists, a warning goes to standard error and the file is overwritten. A file
that cannot be processed is reported and skipped. A file that sits directly in
`source` cannot be processed either, because it has no series folder. The
command exits with status 1 only when `source` cannot be read or `output`
cannot be cleared.

## Library use

```python
from zaohelp.chapters import (
    ChapterAtom, Chapters, parse_chapter_xml, chapters_to_xml,
    read_chapters_from_mkv, add_chapter_to_mkv,
)
from zaohelp.fileops import list_dir_with_kind
from zaohelp.scan import split_by_chapters, process_mkv_file

chapters = read_chapters_from_mkv("episode01.mkv")
print(chapters.format_listing())

add_chapter_to_mkv("episode01.mkv", "00:01:30.000", "Opening")

entries = list_dir_with_kind("Series", True)
with_chapters, without_chapters = split_by_chapters(entries, True)
```

Modules:

- `zaohelp.chapters` holds the chapter model and the MKVToolNix calls:
  - `ChapterAtom` has `start_time`, `title` and an optional `end_time`, plus
    `format_line()`.
  - `Chapters` is iterable and has `len()`, `append()` and `format_listing()`.
  - `parse_chapter_xml` and `chapters_to_xml` convert to and from Matroska
    chapter XML.
  - `extract_chapters` and `read_chapters_from_mkv` run `mkvextract`.
  - `add_chapter_to_mkv` appends a chapter and writes it back with
    `mkvpropedit`.
- `zaohelp.fileops` holds the directory helpers:
  - `list_dir_with_kind` returns `Entry` objects that carry an `EntryKind`
    (`FILE`, `DIRECTORY` or `OTHER`).
  - The path helpers are `get_top_level_dir`, `relative_after`,
    `relative_before` and `clear_folder_contents`.
- `zaohelp.scan` holds the sorting and listing functions:
  - `split_by_chapters`, `all_files_have_chapters` and `has_chapters` sort
    files by chapter presence. `has_chapters` reads from a temporary copy of
    the file.
  - `process_mkv_file` writes one listing and returns an `MkvMetadata`.
- `zaohelp.temp` holds temporary-file helpers: `create_temp_file` and
  `copy_to_temp`.

## Limitations

- The package does not measure video length. `MkvMetadata.duration` is always
  `20.0`.
- The package does not analyse chapter titles, for example to detect
  openings.
- Only `.mkv` files are handled.
- Without the MKVToolNix programs in `third_party/bin`, no chapters can be read
  or written.

## Tests

```
pip install .[test]
pytest
```