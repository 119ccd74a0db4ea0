[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konan"
version = "0.1.0"
description = "Print text, headings and files on a networked ESC/POS receipt printer"
requires-python = ">=3.10"
dependencies = []
keywords = ["escpos", "receipt", "thermal-printer", "printing", "cli"]
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
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
konan = "konan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["konan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
