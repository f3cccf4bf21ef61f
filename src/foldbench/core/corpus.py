"""Word lists used by the benchmarks.

Two corpora are shipped. The English list is the common case of "mostly
ASCII, but not always". The Bulgarian list is the case "no ASCII at all,
every word needs Unicode folding".
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from ..resources import read_word_file

ENGLISH_NAME = "english"
BULGARIAN_NAME = "bulgarian"


@dataclass(slots=True, frozen=True)
class WordList:
    """A named, immutable, ordered list of words.

    Attributes:
        name: Short label used in reports.
        words: Words in their original order. Duplicates are allowed.
    """

    name: str
    words: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.words:
            raise ValueError(f"word list {self.name!r} must not be empty")

    def __len__(self) -> int:
        return len(self.words)

    def ascii_ratio(self) -> float:
        """Fraction of characters in the list that are ASCII."""
        total = sum(len(word) for word in self.words)
        ascii_chars = sum(1 for word in self.words for ch in word if ch.isascii())
        return ascii_chars / total if total else 0.0


@lru_cache(maxsize=None)
def load_word_list(name: str) -> WordList:
    """Load a packaged word list once and keep it for the process lifetime.

    Raises:
        FileNotFoundError: If the list is not packaged.
    """
    return WordList(name=name, words=tuple(read_word_file(name)))


def english() -> WordList:
    """The mostly-ASCII corpus."""
    return load_word_list(ENGLISH_NAME)


def bulgarian() -> WordList:
    """The fully non-ASCII corpus."""
    return load_word_list(BULGARIAN_NAME)


def all_corpora() -> tuple[WordList, WordList]:
    """Both corpora, English first."""
    return (english(), bulgarian())
