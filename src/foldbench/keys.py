"""Case-insensitive key types.

Two families of keys are provided:

- ``Ascii`` folds only the ASCII letters ``A-Z``. It is the fast path and is
  only correct for text that is known to be ASCII.
- ``UniCase`` applies full Unicode case folding (``str.casefold``), including
  multi-codepoint expansions such as ``ß -> ss``. ``UniCase.new`` picks the
  ASCII folding when the input happens to be pure ASCII.

Every key owns a fresh UTF-8 copy of its source text, so building a key always
pays for an allocation, just as a real application storing the key would.

Example:
    >>> from foldbench.keys import Ascii, UniCase
    >>> Ascii("Apple") == Ascii("APPLE")
    True
    >>> UniCase.unicode("straße") == UniCase.unicode("STRASSE")
    True
"""

from __future__ import annotations

from typing import Any


class Ascii:
    """ASCII-only case-insensitive key.

    Non-ASCII characters are compared byte-for-byte, so ``Ascii("Ж")`` and
    ``Ascii("ж")`` are different keys.
    """

    __slots__ = ("_buf", "_folded")

    def __init__(self, text: str) -> None:
        self._buf = text.encode("utf-8")
        # bytes.lower() only maps A-Z
        self._folded = self._buf.lower()

    @property
    def text(self) -> str:
        """The original text, decoded from the owned buffer."""
        return self._buf.decode("utf-8")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Ascii):
            return NotImplemented
        return self._folded == other._folded

    def __hash__(self) -> int:
        return hash(self._folded)

    def __repr__(self) -> str:
        return f"Ascii({self.text!r})"


class UniCase:
    """Unicode case-insensitive key.

    Use ``UniCase.new`` (or the plain constructor) to choose the folding
    based on the content, or ``UniCase.unicode`` to always apply full
    Unicode folding.
    """

    __slots__ = ("_buf", "_folded", "_is_ascii")

    def __init__(self, text: str) -> None:
        self._buf = text.encode("utf-8")
        self._is_ascii = text.isascii()
        if self._is_ascii:
            self._folded = self._buf.lower()
        else:
            self._folded = text.casefold().encode("utf-8")

    @classmethod
    def new(cls, text: str) -> UniCase:
        """Create a key, using ASCII folding when the text is pure ASCII."""
        return cls(text)

    @classmethod
    def unicode(cls, text: str) -> UniCase:
        """Create a key that always applies full Unicode case folding."""
        key = cls.__new__(cls)
        key._buf = text.encode("utf-8")
        key._is_ascii = False
        key._folded = text.casefold().encode("utf-8")
        return key

    @property
    def text(self) -> str:
        """The original text, decoded from the owned buffer."""
        return self._buf.decode("utf-8")

    @property
    def is_ascii(self) -> bool:
        """True if the key was folded with the ASCII fast path."""
        return self._is_ascii

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UniCase):
            return NotImplemented
        # casefold() agrees with ASCII lowering on ASCII input, so keys built
        # through different paths still compare by folded bytes
        return self._folded == other._folded

    def __hash__(self) -> int:
        return hash(self._folded)

    def __repr__(self) -> str:
        kind = "ascii" if self._is_ascii else "unicode"
        return f"UniCase({self.text!r}, {kind})"


__all__ = ["Ascii", "UniCase"]
