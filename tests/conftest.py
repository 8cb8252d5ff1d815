"""Shared fixtures for dictionary tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.dictionary import Dictionary

SAMPLE_FILE = """\
cat animal that meows
+  and purrs
dog animal that barks
"""


@pytest.fixture
def empty_dictionary() -> Dictionary:
    return Dictionary()


@pytest.fixture
def small_dictionary() -> Dictionary:
    """Exactly {cat, car, dog}, inserted directly. No file I/O."""
    d = Dictionary()
    d.insert("cat", "a")
    d.insert("car", "b")
    d.insert("dog", "c")
    return d


@pytest.fixture
def nested_dictionary() -> Dictionary:
    """Words that are prefixes of other words."""
    d = Dictionary()
    for word, meaning in [
        ("car", "vehicle"),
        ("card", "stiff paper"),
        ("cards", "more than one card"),
        ("care", "attention"),
        ("a", "indefinite article"),
        ("an", "indefinite article before a vowel"),
    ]:
        d.insert(word, meaning)
    return d


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "dict.txt"
    path.write_text(SAMPLE_FILE, encoding="utf-8")
    return path
