"""Equivalence harness: run both strategies and report where they disagree.

Divergence is reported, never raised. Every finding is logged and collected
on a ComparisonReport so a caller can inspect or serialize it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from phonewords.dictionary import Dictionary
from phonewords.results import ResultMap, SearchResult
from phonewords.solver import find_all_split, find_all_walk

logger = logging.getLogger("phonewords")


@dataclass
class ComparisonReport:
    first_size: int
    second_size: int
    canonical: bool = True
    missing_keys: list[str] = field(default_factory=list)
    extra_keys: list[str] = field(default_factory=list)
    mismatched: dict[str, tuple[list[str], list[str]]] = field(default_factory=dict)
    order_only: list[str] = field(default_factory=list)

    @property
    def size_mismatch(self) -> bool:
        return self.first_size != self.second_size

    @property
    def matches(self) -> bool:
        return not (self.size_mismatch or self.missing_keys or self.extra_keys or self.mismatched)

    def to_dict(self) -> dict:
        return {
            "matches": self.matches,
            "canonical": self.canonical,
            "first_size": self.first_size,
            "second_size": self.second_size,
            "missing_keys": self.missing_keys,
            "extra_keys": self.extra_keys,
            "mismatched": {k: {"first": a, "second": b} for k, (a, b) in self.mismatched.items()},
            "order_only": self.order_only,
        }


def compare_results(first: ResultMap, second: ResultMap, canonical: bool = True) -> ComparisonReport:
    """Compare two result maps key by key.

    With canonical=True each key's decompositions are compared as sorted
    lists; a key whose lists hold the same items in a different order is only
    listed under order_only. With canonical=False that key is a mismatch too.
    """
    report = ComparisonReport(first_size=len(first), second_size=len(second), canonical=canonical)

    if report.size_mismatch:
        logger.warning("The results are not the same size, first results=%d, second results=%d",
                       report.first_size, report.second_size)

    for key in sorted(first.keys()):
        if key not in second:
            report.missing_keys.append(key)
            logger.warning("Missing the key %s in the second results", key)
            continue

        a, b = first[key], second[key]
        if a == b:
            continue
        if sorted(a) == sorted(b):
            report.order_only.append(key)
            logger.warning("For the key %s the results differ only in order, first=%s, second=%s", key, a, b)
            if canonical:
                continue
        report.mismatched[key] = (list(a), list(b))
        logger.warning("For the key %s the results are not the same, first results=%s, second results=%s",
                       key, a, b)

    for key in sorted(second.keys()):
        if key not in first:
            report.extra_keys.append(key)
            logger.warning("Unexpected key %s in the second results", key)

    if report.matches:
        logger.info("The results are matching (%d keys)", report.first_size)
    return report


def run_comparison(digits: str, dictionary: Dictionary,
                   canonical: bool = True) -> tuple[SearchResult, SearchResult, ComparisonReport]:
    split_result = find_all_split(digits, dictionary)
    walk_result = find_all_walk(digits, dictionary)
    report = compare_results(split_result.results, walk_result.results, canonical=canonical)
    logger.info("digits=%s split_probes=%d walk_probes=%d matches=%s",
                digits, split_result.probes, walk_result.probes, report.matches)
    return split_result, walk_result, report
