"""Benchmark parameters that print as a short label instead of their contents."""

from __future__ import annotations

from dataclasses import dataclass, field

from .corpus import WordList, all_corpora


@dataclass(slots=True, frozen=True)
class Labeled:
    """A corpus wrapped with a human-readable label.

    ``str()``, ``repr()`` and ``format()`` all render only the label, so a
    report never dumps thousands of words.
    """

    name: str
    words: tuple[str, ...] = field(repr=False)

    @classmethod
    def from_word_list(cls, word_list: WordList) -> Labeled:
        return cls(name=word_list.name, words=word_list.words)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)


def corpus_params() -> list[Labeled]:
    """Both corpora as labeled benchmark parameters."""
    return [Labeled.from_word_list(word_list) for word_list in all_corpora()]
