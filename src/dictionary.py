"""Trie-backed dictionary for exact word lookup and prefix search."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from src.constants import ALPHABET, DEFAULT_DICTIONARY_PATH

_LETTERS = frozenset(ALPHABET)


class InvalidWordError(ValueError):
    """Raised when a word to insert is not made of lowercase a-z letters."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Invalid word {word!r}: only lowercase letters a-z are allowed")
        self.word = word


class TrieNode:
    __slots__ = ("children", "is_terminal", "meaning")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.meaning: str = ""


def is_valid_word(word: str) -> bool:
    return bool(word) and all(ch in _LETTERS for ch in word)


class Dictionary:
    """Prefix tree mapping lowercase words to their meanings."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._word_count = 0

    def insert(self, word: str, meaning: str) -> None:
        """Store *meaning* under *word*, replacing any previous meaning.

        Raises InvalidWordError before touching the tree if *word* is empty
        or contains anything other than a-z.
        """
        if not is_valid_word(word):
            raise InvalidWordError(word)
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._word_count += 1
        node.meaning = meaning

    def lookup(self, word: str) -> str | None:
        """Return the meaning of *word*, or None unless it is an exact match."""
        node = self._walk(word)
        if node is None or not node.is_terminal:
            return None
        return node.meaning

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def prefix_search(self, prefix: str) -> Iterator[tuple[str, str]]:
        """Yield (word, meaning) for every stored word starting with *prefix*.

        Words come out in pre-order: the prefix itself first if it is a
        word, then its subtree with letters visited alphabetically. An
        unknown prefix yields nothing.
        """
        start = self._walk(prefix)
        if start is None:
            return
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                yield word, node.meaning
            # Reverse order so the smallest letter is popped first
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], word + ch))

    def load(self, path: str | Path) -> int:
        """Load entries from a dictionary file. Returns the number committed."""
        from src.loader import load_file

        return load_file(self, path)

    def clear(self) -> None:
        self.root = TrieNode()
        self._word_count = 0

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            # Characters outside a-z never appear as keys
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @property
    def word_count(self) -> int:
        return self._word_count

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        return self.lookup(word) is not None


def load_default_dictionary(path: str | Path | None = None) -> Dictionary:
    """Load the dictionary bundled in src/data/."""
    path = Path(path) if path is not None else DEFAULT_DICTIONARY_PATH
    if not path.exists():
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            "Pass --file or place a dictionary file at src/data/dictionary.txt"
        )
    d = Dictionary()
    d.load(path)
    return d
