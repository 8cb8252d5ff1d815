"""CLI entry point for the dictionary lookup tool."""

from __future__ import annotations

import argparse
import logging
import sys

from src.constants import DEFAULT_DICTIONARY_PATH, LOGGER_NAME
from src.dictionary import Dictionary
from src.display import print_guide, print_lookup, print_no_matches, print_prefix_matches

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger(LOGGER_NAME)


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if n < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dictionary lookup: exact word search and prefix search",
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help=f"Dictionary file to load (default: {DEFAULT_DICTIONARY_PATH})",
    )
    parser.add_argument(
        "--word", "-w",
        type=str,
        help="Look up a single word and exit",
    )
    parser.add_argument(
        "--prefix", "-p",
        type=str,
        help="List the words starting with a prefix and exit",
    )
    parser.add_argument(
        "--limit", "-n",
        type=positive_int,
        default=None,
        help="Maximum number of prefix matches to print",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug-level logging",
    )
    return parser.parse_args(argv)


def load_into(dictionary: Dictionary, path: str) -> bool:
    """Load *path* into *dictionary*, reporting failures. Returns success."""
    try:
        dictionary.load(path)
    except OSError as e:
        print(f"Could not open the file: {e}")
        return False
    print(f"The dictionary has been created ({dictionary.word_count} words).")
    return True


def lookup_word(dictionary: Dictionary, word: str) -> bool:
    word = word.strip().lower()
    meaning = dictionary.lookup(word)
    print_lookup(word, meaning)
    return meaning is not None


def lookup_prefix(dictionary: Dictionary, prefix: str, limit: int | None = None) -> int:
    prefix = prefix.strip().lower()
    if not dictionary.has_prefix(prefix):
        print_no_matches(prefix)
        return 0
    return print_prefix_matches(prefix, dictionary.prefix_search(prefix), limit)


def menu_loop(dictionary: Dictionary, limit: int | None = None) -> None:
    """Interactive menu: search, prefix search, load and help until quit."""
    print_guide()
    while True:
        print("\n[S]earch / [P]refix / [L]oad / [H]elp / [Q]uit")
        try:
            choice = input("> ").strip().lower()
            if choice == "q":
                print("Leaving the program")
                break
            if choice == "s":
                lookup_word(dictionary, input("Word to search: "))
            elif choice == "p":
                lookup_prefix(dictionary, input("Prefix to search by: "), limit)
            elif choice == "l":
                load_into(dictionary, input("Dictionary file: ").strip())
            elif choice == "h":
                print_guide()
            else:
                print("Invalid choice.")
        except (EOFError, KeyboardInterrupt):
            print("\nLeaving the program")
            break


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary()
    path = args.file or str(DEFAULT_DICTIONARY_PATH)
    loaded = load_into(dictionary, path)

    if args.word is not None or args.prefix is not None:
        if not loaded:
            sys.exit(1)
        found = True
        if args.word is not None:
            found = lookup_word(dictionary, args.word)
        if args.prefix is not None:
            found = lookup_prefix(dictionary, args.prefix, args.limit) > 0 and found
        if not found:
            sys.exit(1)
        return

    menu_loop(dictionary, args.limit)


if __name__ == "__main__":
    main()
