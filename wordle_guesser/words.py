"""
words.py

Loads the frequency-weighted dictionary and the answer list.

The dictionary is the full set of admissible guesses. Each line is

    WORD FREQUENCY

and the frequency is used to prefer common words when two guesses are
equally informative.
"""

import threading
from pathlib import Path
from types import MappingProxyType

import numpy as np

from wordle_guesser.patterns import WORD_LENGTH, word_letters


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"
ANSWERS_PATH = DATA_DIR / "answers.txt"

_SHARED = {}
_SHARED_LOCK = threading.Lock()


class DictionaryFormatError(ValueError):
    """A dictionary or answer file could not be parsed."""


def to_word(text: str) -> str:
    """Validate a 5-letter ASCII word and return it in lowercase."""
    if len(text) != WORD_LENGTH or not text.isascii() or not text.isalpha():
        raise ValueError(f"not a {WORD_LENGTH}-letter ASCII word: {text!r}")
    return text.lower()


class Dictionary:
    """
    Immutable word -> frequency mapping.

    Words are kept in lexicographic order, which is also the order the
    scorer walks them in. `letters` and `weights` are row-aligned numpy
    views of the same data for vectorized scoring.
    """

    def __init__(self, counts):
        self._counts = MappingProxyType(dict(sorted(counts.items())))
        self.words = tuple(self._counts)
        self.letters = word_letters(self.words)
        self.letters.setflags(write=False)
        self.weights = np.fromiter(self._counts.values(), dtype=np.int64, count=len(self.words))
        self.weights.setflags(write=False)

    @classmethod
    def from_items(cls, items):
        counts = {}
        for word, weight in items:
            word = to_word(word)
            if weight < 0:
                raise ValueError(f"negative frequency for {word!r}: {weight}")
            counts[word] = int(weight)
        return cls(counts)

    @property
    def mapping(self):
        return self._counts

    def weight(self, word: str) -> int:
        return self._counts.get(word, 0)

    def items(self):
        return self._counts.items()

    def __contains__(self, word):
        return word in self._counts

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __repr__(self):
        return f"Dictionary({len(self.words)} words)"


def parse_dictionary(lines) -> Dictionary:
    """Parse `WORD FREQUENCY` lines. Any malformed line is fatal."""
    counts = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        parts = line.split(" ")
        if len(parts) != 2:
            raise DictionaryFormatError(
                f"line {lineno}: expected 'WORD FREQUENCY', got {line!r}"
            )

        word_text, count_text = parts
        try:
            word = to_word(word_text)
        except ValueError as exc:
            raise DictionaryFormatError(f"line {lineno}: {exc}") from exc

        try:
            count = int(count_text)
        except ValueError as exc:
            raise DictionaryFormatError(
                f"line {lineno}: frequency is not a number: {count_text!r}"
            ) from exc
        if count < 0:
            raise DictionaryFormatError(f"line {lineno}: negative frequency {count}")

        if word in counts:
            raise DictionaryFormatError(f"line {lineno}: duplicate word {word!r}")
        counts[word] = count

    return Dictionary(counts)


def load_dictionary(path=DICTIONARY_PATH) -> Dictionary:
    with open(path, "r", encoding="ascii", errors="strict") as f:
        try:
            return parse_dictionary(f)
        except UnicodeDecodeError as exc:
            raise DictionaryFormatError(f"{path}: non-ASCII content") from exc


def load_answers(path=ANSWERS_PATH, dictionary=None) -> list:
    """
    Returns:
        answers: whitespace-separated answer words, in file order
    """
    try:
        text = Path(path).read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise DictionaryFormatError(f"{path}: non-ASCII content") from exc

    answers = []
    for token in text.split():
        try:
            word = to_word(token)
        except ValueError as exc:
            raise DictionaryFormatError(f"{path}: {exc}") from exc
        if dictionary is not None and word not in dictionary:
            raise DictionaryFormatError(f"{path}: answer {word!r} is not in the dictionary")
        answers.append(word)
    return answers


def shared_dictionary(path=DICTIONARY_PATH) -> Dictionary:
    """
    The process-wide dictionary for *path*, loaded on first use.

    Loading happens under a lock, so concurrent first callers all get the
    same instance and the file is parsed exactly once.
    """
    key = Path(path).resolve()
    dictionary = _SHARED.get(key)
    if dictionary is not None:
        return dictionary

    with _SHARED_LOCK:
        dictionary = _SHARED.get(key)
        if dictionary is None:
            dictionary = load_dictionary(key)
            _SHARED[key] = dictionary
    return dictionary
