"""Shared fixtures for lessondeck tests."""

import pytest

from lessondeck.deck import DeckIndex
from lessondeck.schemas import SourceDescriptor


PAGE_BODIES = {
    "1.Basic": '//:## VALUE TYPE\nvar currentLoginAttempt = 0\nlet languageName = "Swift"\n',
    "2.Operator": "//:# Operators\nlet (x, y) = (1, 2)\n",
    "03. Collection": 'var shoppingList = ["Eggs", "Milk"]\n',
    "04. Control Flow": "for index in 1...5 {\n    print(index)\n}\n",
    "What is new": "/*:\n2015-09-09\n* @autoclosure attribute\n*/\n",
}


@pytest.fixture
def sources():
    return [
        SourceDescriptor(name=name, text=text, language="swift")
        for name, text in PAGE_BODIES.items()
    ]


@pytest.fixture
def index(sources):
    return DeckIndex.build(sources, title="Swift Programming Book")


@pytest.fixture
def playground(tmp_path):
    """A playground bundle with the same pages as PAGE_BODIES."""
    bundle = tmp_path / "Swift Programming Book.playground"
    for name, text in PAGE_BODIES.items():
        page = bundle / "Pages" / f"{name}.xcplaygroundpage"
        page.mkdir(parents=True)
        (page / "Contents.swift").write_text(text, encoding="utf-8")
    (bundle / "contents.xcplayground").write_text("<playground/>", encoding="utf-8")
    return bundle


@pytest.fixture
def lesson_dir(tmp_path):
    """A plain directory of lesson files plus a file that should be ignored."""
    directory = tmp_path / "lessons"
    directory.mkdir()
    (directory / "1.Basic.swift").write_text("let a = 1\n", encoding="utf-8")
    (directory / "03. Collection.swift").write_text("var list = [1]\n", encoding="utf-8")
    (directory / "notes.md").write_text("# Notes\n", encoding="utf-8")
    (directory / "image.png").write_bytes(b"\x89PNG")
    return directory
