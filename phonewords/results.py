from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


def format_decomposition(words: Iterable[str]) -> str:
    """Render a word sequence as "[w1, w2, ..., wk]".

    The rendered form is what gets stored and compared, so two decompositions
    are equal exactly when their strings are equal.
    """
    return "[" + ", ".join(words) + "]"


class ResultMap:
    """Key (concatenated letters) -> decompositions in discovery order."""

    def __init__(self):
        self._entries: dict[str, list[str]] = {}

    def record(self, key: str, words: Iterable[str]):
        self._entries.setdefault(key, []).append(format_decomposition(words))

    def __getitem__(self, key: str) -> list[str]:
        return self._entries[key]

    def get(self, key: str, default=None):
        return self._entries.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def keys(self):
        return self._entries.keys()

    def items(self):
        return self._entries.items()

    def as_dict(self) -> dict[str, list[str]]:
        return {key: list(decomps) for key, decomps in self._entries.items()}

    def __repr__(self) -> str:
        return f"ResultMap({len(self._entries)} keys)"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one search: the result map plus the final probe count."""
    strategy: str
    digits: str
    results: ResultMap
    probes: int
