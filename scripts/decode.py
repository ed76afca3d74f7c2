"""Print every word decomposition of one phone number."""
import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from phonewords.dictionary import DictionaryUnavailableError, load_dictionary
from phonewords.keypad import InvalidDigitsError
from phonewords.settings import settings
from phonewords.solver import STRATEGIES, solve


def main():
    parser = argparse.ArgumentParser(description="Spell a phone number as dictionary words")
    parser.add_argument("digits", help="Phone number, digits only")
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), default=settings.DEFAULT_STRATEGY)
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH))
    args = parser.parse_args()

    try:
        dictionary = load_dictionary(args.dictionary)
        result = solve(args.digits, dictionary, args.strategy)
    except (DictionaryUnavailableError, InvalidDigitsError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    for key in sorted(result.results):
        print(f"{key}: {', '.join(result.results[key])}")
    print(f"\n{len(result.results)} keys, {result.probes} dictionary probes ({args.strategy})")


if __name__ == "__main__":
    main()
