from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger("phonewords")


class DictionaryUnavailableError(RuntimeError):
    """The word list could not be read; no search can run without it."""


class Dictionary:
    """Immutable word set. Words are stored and matched exactly as given."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: frozenset[str] = frozenset(words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"


def load_dictionary(path: str | Path) -> Dictionary:
    """Load a newline-separated UTF-8 word list.

    Every token produced by splitting on "\\n" goes in verbatim, including the
    empty token after a trailing newline. No case folding or stripping.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
        contents = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailableError(f"Cannot load dictionary from {path}: {e}") from e

    dictionary = Dictionary(contents.split("\n"))
    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary


class DictionaryOracle:
    """Membership oracle bound to a single search; counts every probe."""

    __slots__ = ("dictionary", "probes")

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary
        self.probes: int = 0

    def contains(self, word: str) -> bool:
        self.probes += 1
        return word in self.dictionary
