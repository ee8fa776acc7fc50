[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kanakit"
version = "0.1.0"
description = "Character classification, kana conversion tables, tokenizing and okurigana trimming for Japanese text"
requires-python = ">=3.10"
dependencies = []
keywords = ["japanese", "kana", "hiragana", "katakana", "romaji", "kanji", "tokenize", "okurigana"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kanakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
