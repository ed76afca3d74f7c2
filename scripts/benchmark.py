"""
Benchmark both phone-word strategies and check that they agree.

Usage:
    python -m scripts.benchmark [--runs N] [--dictionary PATH] [DIGITS:KEY ...]

Examples:
    python -m scripts.benchmark
    python -m scripts.benchmark --runs 50 4448786:higusto
    python -m scripts.benchmark --dictionary words.txt --exact 4355648786:hellogusto

For every number this will:
  1. Run the enumerate-then-split search N times and report the elapsed time
  2. Show the result count, probe count and decompositions of the watched key
  3. Do the same for the fused digit walk
  4. Compare both result maps and print any divergence
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from phonewords.compare import compare_results
from phonewords.dictionary import DictionaryUnavailableError, load_dictionary
from phonewords.keypad import InvalidDigitsError
from phonewords.metrics import time_runs
from phonewords.settings import settings
from phonewords.solver import find_all_split, find_all_walk

DEFAULT_SAMPLES = [("4448786", "higusto"), ("4355648786", "hellogusto")]


def _parse_sample(text: str) -> tuple[str, str]:
    digits, _, key = text.partition(":")
    return digits, key


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def display_results(result, key: str):
    print(f"Number of results = {len(result.results)}")
    print(f"Number of searches = {result.probes}")
    if key:
        print(f"For {key} the results are {result.results.get(key)}")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Phone Words strategy benchmark")
    parser.add_argument("samples", nargs="*", type=_parse_sample,
                        help="DIGITS or DIGITS:KEY pairs (default: the built-in samples)")
    parser.add_argument("--runs", type=_positive_int, default=settings.BENCHMARK_RUNS,
                        help=f"Runs per strategy (default: {settings.BENCHMARK_RUNS})")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help="Newline-separated word list")
    parser.add_argument("--exact", action="store_true",
                        help="Compare decomposition order exactly instead of canonically")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose or settings.DEBUG else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        dictionary = load_dictionary(args.dictionary)
    except DictionaryUnavailableError as e:
        print(f"Error: {e}")
        sys.exit(1)

    samples = args.samples or DEFAULT_SAMPLES
    all_match = True
    for digits, key in samples:
        try:
            first, elapsed = time_runs(lambda: find_all_split(digits, dictionary), args.runs)
        except InvalidDigitsError as e:
            print(f"Error: {e}")
            sys.exit(1)
        print(f"{args.runs} runs for {digits} using the first search took {elapsed}ms")
        display_results(first, key)

        second, elapsed = time_runs(lambda: find_all_walk(digits, dictionary), args.runs)
        print(f"{args.runs} runs for {digits} using the second search took {elapsed}ms")
        display_results(second, key)

        report = compare_results(first.results, second.results,
                                 canonical=not args.exact and settings.CANONICAL_COMPARE)
        if report.matches:
            print("The results are matching.")
        else:
            all_match = False
            print(f"The results differ: missing={report.missing_keys} extra={report.extra_keys} "
                  f"mismatched={sorted(report.mismatched)}")
        if report.order_only:
            print(f"Keys whose decompositions differ only in order: {report.order_only}")
        print()

    sys.exit(0 if all_match else 2)


if __name__ == "__main__":
    main()
