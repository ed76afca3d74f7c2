from __future__ import annotations

import itertools
import logging
import math
from typing import Callable, Iterator, Mapping

from phonewords.dictionary import Dictionary, DictionaryOracle
from phonewords.keypad import KEYPAD, letters_of, validate_digits
from phonewords.results import ResultMap, SearchResult

logger = logging.getLogger("phonewords")


def enumerate_letters(digits: str, keypad: Mapping[str, str] = KEYPAD) -> Iterator[str]:
    """Every letter string the digits can spell, in keypad order.

    Validation happens at call time; the strings themselves are produced lazily.
    Calling again restarts the sequence.
    """
    validate_digits(digits, keypad)
    if not digits:
        return iter(())
    choices = [letters_of(d, keypad) for d in digits]
    return ("".join(letters) for letters in itertools.product(*choices))


def count_letter_strings(digits: str, keypad: Mapping[str, str] = KEYPAD) -> int:
    """How many letter strings enumerate_letters would yield for these digits."""
    validate_digits(digits, keypad)
    if not digits:
        return 0
    return math.prod(len(letters_of(d, keypad)) for d in digits)


def find_all_split(digits: str, dictionary: Dictionary, keypad: Mapping[str, str] = KEYPAD) -> SearchResult:
    """Enumerate every letter string, then split each one into dictionary words.

    Partitions are explored depth-first with the shortest leading word first.
    """
    letter_strings = enumerate_letters(digits, keypad)
    oracle = DictionaryOracle(dictionary)
    results = ResultMap()
    path: list[str] = []

    def split(text: str, start: int):
        if start == len(text):
            results.record(text, path)
            return

        for end in range(start + 1, len(text) + 1):
            word = text[start:end]
            if oracle.contains(word):
                path.append(word)
                split(text, end)
                path.pop()

    for text in letter_strings:
        split(text, 0)

    logger.debug("strategy=split digits=%s keys=%d probes=%d", digits, len(results), oracle.probes)
    return SearchResult("split", digits, results, oracle.probes)


def find_all_walk(digits: str, dictionary: Dictionary, keypad: Mapping[str, str] = KEYPAD) -> SearchResult:
    """Walk the digits once, choosing letters and word boundaries together.

    For each letter of the next digit the candidate word is first committed
    (when it is in the dictionary) and then extended, which keeps discovery
    order identical to find_all_split.
    """
    validate_digits(digits, keypad)
    oracle = DictionaryOracle(dictionary)
    results = ResultMap()
    path: list[str] = []
    total = len(digits)

    def walk(pos: int, current: str, key: str):
        if pos == total:
            # A dangling current word means some digits were never committed
            if path and len(key) == total:
                results.record(key, path)
            return

        for letter in letters_of(digits[pos], keypad):
            word = current + letter
            if oracle.contains(word):
                path.append(word)
                walk(pos + 1, "", key + word)
                path.pop()
            walk(pos + 1, word, key)

    walk(0, "", "")

    logger.debug("strategy=walk digits=%s keys=%d probes=%d", digits, len(results), oracle.probes)
    return SearchResult("walk", digits, results, oracle.probes)


STRATEGIES: dict[str, Callable[..., SearchResult]] = {
    "split": find_all_split,
    "walk": find_all_walk,
}


def solve(digits: str, dictionary: Dictionary, strategy: str = "walk",
          keypad: Mapping[str, str] = KEYPAD) -> SearchResult:
    try:
        search = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown strategy {strategy!r} (expected one of {sorted(STRATEGIES)})") from None
    return search(digits, dictionary, keypad)
