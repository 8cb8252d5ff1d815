"""Parser for the line-oriented dictionary file format.

Each entry starts on a line of the form ``word meaning text``. A line
beginning with ``+`` continues the meaning of the entry above it::

    cat animal that meows
    +  and purrs
    dog animal that barks

Meanings are plain Python strings, so long entries grow instead of being
truncated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from src.constants import CONTINUATION_MARKER, LOGGER_NAME
from src.dictionary import is_valid_word

if TYPE_CHECKING:
    from src.dictionary import Dictionary

log = logging.getLogger(LOGGER_NAME)


def parse_entries(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield (word, meaning) pairs from dictionary-file lines, in file order."""
    word: str | None = None
    meaning_parts: list[str] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line.startswith(CONTINUATION_MARKER):
            if word is None:
                log.debug("Line %d: continuation with no entry to extend, ignored", lineno)
                continue
            meaning_parts.append(line[len(CONTINUATION_MARKER):])
            continue
        if not line.strip():
            continue

        if word is not None:
            yield word, "".join(meaning_parts)

        fields = line.split(None, 1)
        word = fields[0]
        meaning_parts = [fields[1]] if len(fields) > 1 else []

    if word is not None:
        yield word, "".join(meaning_parts)


def load_file(dictionary: Dictionary, path: str | Path) -> int:
    """Insert every entry of the file at *path* into *dictionary*.

    Words are lowercased first; entries that still contain characters
    outside a-z are skipped with a warning. Opening errors propagate before
    anything is inserted. Entries are committed as they are read, so an
    error part-way through leaves the earlier entries loaded.
    """
    loaded = 0
    skipped = 0
    # Undecodable bytes become U+FFFD; such words then fail the a-z check
    with open(path, encoding="utf-8", errors="replace") as f:
        for word, meaning in parse_entries(f):
            word = word.lower()
            if not is_valid_word(word):
                log.warning("Skipping %r: not a word of letters a-z", word)
                skipped += 1
                continue
            dictionary.insert(word, meaning)
            loaded += 1

    log.info("Loaded %s entries from %s", f"{loaded:,}", path)
    if skipped:
        log.warning("Skipped %d invalid entries in %s", skipped, path)
    return loaded
