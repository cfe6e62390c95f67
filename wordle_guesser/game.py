"""
game.py

Plays games: asks a guesser for words, scores them against the secret,
and feeds the masks back until the secret is found or the turn ceiling
is hit.
"""

from dataclasses import dataclass

from tqdm import tqdm

from wordle_guesser.patterns import Guess, compute, render_mask


MAX_TURNS = 100


class InadmissibleGuessError(RuntimeError):
    """A guesser played a word that is not in the dictionary."""


@dataclass
class GameResult:
    secret: str
    turns: int
    solved: bool


def play(secret, guesser, dictionary, max_turns=MAX_TURNS, verbose=False):
    """
    Play one game. Returns the 1-based turn on which *secret* was guessed,
    or None if *max_turns* guesses were not enough.

    *guesser* is a Guesser or any callable taking the history list.
    """
    next_guess = guesser.guess if hasattr(guesser, "guess") else guesser
    history = []

    for turn in range(1, max_turns + 1):
        word = next_guess(history)
        if word == secret:
            if verbose:
                print(f"Guessed '{word.upper()}', which is the answer.")
            return turn

        if word not in dictionary:
            raise InadmissibleGuessError(f"turn {turn}: {word!r} is not in the dictionary")

        mask = compute(secret, word)
        if verbose:
            print(f"Guessed '{word.upper()}', received pattern: {render_mask(mask)}")
        history.append(Guess(word, mask))

    return None


def run_all(guesser, answers, dictionary, rounds=10, skip=0, progress=True, verbose=False):
    """
    Play answers[skip:skip + rounds] in order with one guesser instance,
    so anything it memoizes carries over from game to game.
    """
    results = []
    selected = answers[skip:skip + rounds]

    for secret in tqdm(selected, desc="Games", disable=not progress):
        if verbose:
            tqdm.write("New game")
        turns = play(secret, guesser, dictionary, verbose=verbose)
        if turns is None:
            tqdm.write(f"failed to guess {secret.upper()}")
            results.append(GameResult(secret, MAX_TURNS, False))
        else:
            tqdm.write(f"The answer is '{secret.upper()}', took {turns} tries.")
            results.append(GameResult(secret, turns, True))

    return results


def summarize(results):
    solved = [r.turns for r in results if r.solved]
    return {
        "games": len(results),
        "solved": len(solved),
        "mean_turns": sum(solved) / len(solved) if solved else 0.0,
        "max_turns": max(solved) if solved else 0,
    }


def print_summary(results):
    stats = summarize(results)
    print(f"\n{'Games':>6} {'Solved':>7} {'Mean':>6} {'Max':>5}")
    print("-" * 27)
    print(
        f"{stats['games']:>6} {stats['solved']:>7} "
        f"{stats['mean_turns']:>6.2f} {stats['max_turns']:>5}"
    )
