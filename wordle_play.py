"""
wordle_play.py

Unified CLI for the entropy guesser.

Modes:
default: play the answer list with one strategy and report turn counts
-interactive: suggest guesses for a live game, reading feedback from stdin

Optional:
-strategy NAME: naive, cached, mask-buckets (default), memoized, interactive
-rounds N / -skip N: which slice of the answer list to play
-workers N: score guesses in N worker processes
-verbose: print every guess, mask and remaining-pool size
"""

import argparse

from wordle_guesser.game import print_summary, run_all
from wordle_guesser.interactive import run_session
from wordle_guesser.strategies import STRATEGIES, Interactive, make_guesser
from wordle_guesser.words import (
    ANSWERS_PATH,
    DICTIONARY_PATH,
    load_answers,
    shared_dictionary,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Entropy-maximizing Wordle guesser."
    )
    parser.add_argument(
        "-strategy",
        choices=tuple(STRATEGIES),
        default="mask-buckets",
        help="Guessing strategy for run-all mode (default: mask-buckets).",
    )
    parser.add_argument(
        "-rounds",
        type=int,
        default=10,
        help="Number of answers to play (default: 10).",
    )
    parser.add_argument(
        "-skip",
        type=int,
        default=0,
        help="Number of answers to skip from the start of the list.",
    )
    parser.add_argument(
        "-interactive",
        action="store_true",
        help="Run a single interactive session instead of playing the answer list.",
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=str(DICTIONARY_PATH),
        help="Dictionary file with 'WORD FREQUENCY' lines.",
    )
    parser.add_argument(
        "-answers",
        type=str,
        default=str(ANSWERS_PATH),
        help="Whitespace-separated answer list.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=1,
        help="Worker processes used to score guesses (default: 1).",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Print every guess and the size of the remaining pool.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        dictionary = shared_dictionary(args.dictionary)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"cannot load dictionary: {exc}") from exc

    if args.interactive:
        guesser = Interactive(dictionary, verbose=args.verbose, workers=args.workers)
        run_session(guesser)
        return

    try:
        answers = load_answers(args.answers, dictionary)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"cannot load answers: {exc}") from exc

    guesser = make_guesser(
        args.strategy, dictionary, verbose=args.verbose, workers=args.workers
    )
    results = run_all(
        guesser,
        answers,
        dictionary,
        rounds=args.rounds,
        skip=args.skip,
        verbose=args.verbose,
    )
    print_summary(results)


if __name__ == "__main__":
    main()
