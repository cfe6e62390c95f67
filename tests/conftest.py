import pytest

from wordle_guesser.words import Dictionary


WORDS = {
    "tares": 2571,
    "crate": 8942,
    "slate": 6113,
    "raise": 51321,
    "right": 815213,
    "wrong": 122301,
    "might": 401922,
    "night": 220193,
    "light": 210381,
    "sight": 60291,
    "fight": 70190,
    "tight": 30212,
    "eight": 90121,
    "cigar": 8001,
    "rebut": 1002,
    "sissy": 3010,
    "humph": 902,
    "awake": 24910,
    "blush": 11203,
    "focal": 15022,
}


@pytest.fixture
def dictionary():
    return Dictionary.from_items(WORDS.items())


def recorder(guesser):
    """Wrap a guesser so every word it plays is kept in a list."""
    played = []

    def guess(history):
        word = guesser.guess(history)
        played.append(word)
        return word

    return guess, played
