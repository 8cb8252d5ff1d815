"""Dictionary constants: alphabet, file format markers and default paths."""

from pathlib import Path

# Only these letters can label an edge in the trie
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# A dictionary-file line starting with this extends the previous meaning
CONTINUATION_MARKER = "+"

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "dictionary.txt"

# Name shared by every logger in the project
LOGGER_NAME = "lexitrie"
