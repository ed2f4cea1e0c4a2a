[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zaohelp"
version = "0.1.0"
description = "Sort Matroska video libraries by chapter presence and export chapter listings using MKVToolNix"
requires-python = ">=3.10"
dependencies = []
keywords = ["mkv", "matroska", "chapters", "mkvtoolnix", "video", "anime"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zaohelper = "zaohelp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zaohelp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
