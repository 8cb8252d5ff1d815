"""Terminal rendering of lookup and prefix-search results."""

from __future__ import annotations

from collections.abc import Iterable

RULE = "─" * 60


def render_entry(word: str, meaning: str) -> str:
    return f" ┏━━ {word}\n ┗━━━━━━━━━━ {meaning}"


def render_matches(
    matches: Iterable[tuple[str, str]],
    limit: int | None = None,
) -> tuple[str, int, bool]:
    """Render ``word: meaning`` lines for prefix matches.

    Stops after *limit* matches when given. Returns the text, the number
    of matches rendered and whether more matches were left out.
    """
    lines: list[str] = []
    truncated = False
    for word, meaning in matches:
        if limit is not None and len(lines) >= limit:
            truncated = True
            break
        lines.append(f"{word}: {meaning}")
    return "\n".join(lines), len(lines), truncated


def print_lookup(word: str, meaning: str | None) -> None:
    """Print the result of an exact lookup."""
    print(RULE)
    if meaning is None:
        print("Word not found")
        return
    print(render_entry(word, meaning))
    print()


def print_no_matches(prefix: str) -> None:
    print(f"No words found with prefix '{prefix}'")


def print_prefix_matches(
    prefix: str,
    matches: Iterable[tuple[str, str]],
    limit: int | None = None,
) -> int:
    """Print every word under *prefix*. Returns how many were printed."""
    text, count, truncated = render_matches(matches, limit)
    if count == 0:
        print_no_matches(prefix)
        return 0
    print(text)
    if truncated:
        print(f"  (showing first {count} matches)")
    return count


def print_guide() -> None:
    print(" [Usage]: python -m src.main [--file PATH]")
    print(" [S] Search  -- look up the meaning of a word")
    print(" [P] Prefix  -- list every word starting with a prefix")
    print(" [L] Load    -- load a dictionary file")
    print(" [H] Help    -- show this guide")
    print(" [Q] Quit    -- leave the program")
