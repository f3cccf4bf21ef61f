"""Runtime resources for foldbench.

This module provides access to the packaged word lists using
importlib.resources for reliable access regardless of installation method.
"""

from __future__ import annotations

from importlib import resources

WORDS_PACKAGE = "foldbench.resources"
WORDS_DIR = "words"


def read_word_file(name: str) -> list[str]:
    """Read a packaged word list.

    Args:
        name: Name of the list (e.g., "english").

    Returns:
        Words in file order. Blank lines and ``#`` comment lines are skipped.

    Raises:
        FileNotFoundError: If no list with that name is packaged.
    """
    word_file = resources.files(WORDS_PACKAGE).joinpath(WORDS_DIR).joinpath(f"{name}.txt")
    if not word_file.is_file():
        raise FileNotFoundError(f"Word list not found: {name}")
    content = word_file.read_text(encoding="utf-8")

    words = []
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            words.append(line)
    return words


def list_available_word_lists() -> list[str]:
    """List all packaged word list names (without .txt extension)."""
    words_dir = resources.files(WORDS_PACKAGE).joinpath(WORDS_DIR)
    return sorted(
        f.name.removesuffix(".txt")
        for f in words_dir.iterdir()
        if f.name.endswith(".txt")
    )


__all__ = [
    "read_word_file",
    "list_available_word_lists",
]
