"""
strategies.py

Guessers: objects that turn the game history into the next guess.

All of them follow the same turn:

    1. First turn: reset the pool and play the fixed opening guess.
    2. Narrow the pool with the latest feedback.
    3. One candidate left: play it.
    4. Otherwise play the highest-entropy word of the guess universe.

They differ in how much work they avoid repeating.
"""

from abc import ABC, abstractmethod

from wordle_guesser.entropy import best_guess
from wordle_guesser.patterns import NUM_PATTERNS, encode_mask
from wordle_guesser.pool import CandidatePool
from wordle_guesser.words import Dictionary, shared_dictionary, to_word


# Precomputed offline; close to the best expected score as a first move
OPENING_GUESS = "tares"

# Weight given to words the user adds that the dictionary does not know
DEFAULT_WEIGHT = 1


class Guesser(ABC):
    """Interface every strategy implements."""

    name = "guesser"

    @abstractmethod
    def guess(self, history) -> str:
        """Return the next guess given the list of Guess entries played so far."""


class PoolGuesser(Guesser):
    """Shared turn logic over one dictionary and one candidate pool."""

    partition = "buckets"

    def __init__(self, dictionary, opening=OPENING_GUESS, verbose=False, workers=1, progress=False):
        self.dictionary = dictionary
        self.opening = to_word(opening)
        self.pool = CandidatePool(dictionary)
        self.verbose = verbose
        self.workers = workers
        self.progress = progress

    def guess(self, history) -> str:
        if not history:
            self.pool.reset(self.dictionary)
            return self.opening

        self.pool.retain(history[-1])
        if self.verbose:
            print(f"Number of remaining possibilities: {len(self.pool)}")

        # A single remaining candidate is the answer
        sole = self.pool.sole_remaining()
        if sole is not None:
            return sole

        return self.choose(history)

    def choose(self, history) -> str:
        best = best_guess(
            self.dictionary,
            self.pool,
            self.dictionary,
            partition=self.partition,
            workers=self.workers,
            progress=self.progress,
        )
        if self.verbose:
            print(f"Best guess {best.word}: {best.goodness:.4f} bits")
        return best.word


class Naive(PoolGuesser):
    """Reference semantics: private dictionary, every partition rebuilt mask by mask."""

    name = "naive"
    partition = "naive"

    def __init__(self, dictionary, **options):
        super().__init__(Dictionary(dictionary.mapping), **options)


class Cached(PoolGuesser):
    """Mask-by-mask partitions over the shared, read-only dictionary."""

    name = "cached"
    partition = "naive"


class MaskBuckets(PoolGuesser):
    """One pass per guess word into a dense 243-slot histogram."""

    name = "mask-buckets"


class Memoized(MaskBuckets):
    """
    MaskBuckets plus a table of second guesses.

    After the opening guess the pool depends only on the mask it received,
    so the second guess for each of the 243 masks is computed once and
    reused by every later game played with this instance.
    """

    name = "memoized"

    def __init__(self, dictionary, **options):
        super().__init__(dictionary, **options)
        self.second_guesses = [None] * NUM_PATTERNS

    def memo_key(self, history):
        if len(history) != 1 or history[0].word != self.opening:
            return None
        return encode_mask(history[0].mask)

    def choose(self, history) -> str:
        key = self.memo_key(history)
        if key is not None and self.second_guesses[key] is not None:
            if self.verbose:
                print("I remember this!")
            return self.second_guesses[key]

        word = super().choose(history)
        if key is not None:
            self.second_guesses[key] = word
        return word


class Interactive(Guesser):
    """
    Guesser for a live game against the real Wordle.

    Keeps a private, editable view of the dictionary (`known`) alongside
    the pool, because the real game may reject words the dictionary has or
    accept words it lacks. Any edit marks the session dirty, which turns
    off the opening shortcut and the second-guess table for good.
    """

    name = "interactive"

    def __init__(self, dictionary, opening=OPENING_GUESS, verbose=False, workers=1, progress=False):
        self.known = CandidatePool(dictionary)
        self.pool = CandidatePool(dictionary)
        self.opening = to_word(opening)
        self.verbose = verbose
        self.workers = workers
        self.progress = progress
        self.hard_mode = False
        self.dirty = False
        self.second_guesses = [None] * NUM_PATTERNS
        self._applied = 0

    def remove(self, word):
        """The real game does not accept *word* at all."""
        self.known.discard(word)
        self.pool.discard(word)
        self.dirty = True

    def eliminate(self, word):
        """*word* is a valid guess but not the answer."""
        self.pool.discard(word)
        self.dirty = True

    def allow(self, word):
        """Undo remove(): *word* may be guessed again."""
        if word not in self.known:
            self.known.admit(word, DEFAULT_WEIGHT)
        self.dirty = True

    def consider(self, word):
        """Undo eliminate(): *word* may be the answer again."""
        if word not in self.known:
            self.known.admit(word, DEFAULT_WEIGHT)
        if word not in self.pool:
            self.pool.admit(word, self.known.weight(word))
        self.dirty = True

    def hard(self):
        """From now on only guess words that could be the answer."""
        self.hard_mode = True
        self.dirty = True

    def remaining(self) -> list:
        return self.pool.words()

    def new_game(self):
        """Forget the current game and refill the pool from the known words."""
        self.pool.reset(self.known)
        self._applied = 0

    def guess(self, history) -> str:
        if len(history) < self._applied:
            self.new_game()

        if not history and not self.dirty:
            return self.opening

        # Each history entry narrows the pool exactly once
        for entry in history[self._applied:]:
            self.pool.retain(entry)
        self._applied = len(history)

        if history:
            if self.verbose:
                print(f"Number of remaining possibilities: {len(self.pool)}")
            sole = self.pool.sole_remaining()
            if sole is not None:
                return sole

        key = None
        if not self.dirty and len(history) == 1 and history[0].word == self.opening:
            key = encode_mask(history[0].mask)
            if self.second_guesses[key] is not None:
                if self.verbose:
                    print("I remember this!")
                return self.second_guesses[key]

        universe = self.pool if self.hard_mode else self.known
        best = best_guess(
            universe,
            self.pool,
            self.known,
            workers=self.workers,
            progress=self.progress,
        )
        if key is not None:
            self.second_guesses[key] = best.word
        return best.word


STRATEGIES = {
    "naive": Naive,
    "cached": Cached,
    "mask-buckets": MaskBuckets,
    "memoized": Memoized,
    "interactive": Interactive,
}


def make_guesser(name, dictionary=None, **options) -> Guesser:
    """Build the strategy called *name*; defaults to the shared dictionary."""
    try:
        cls = STRATEGIES[name]
    except KeyError as exc:
        raise ValueError(f"unknown strategy: {name!r} (choose from {', '.join(STRATEGIES)})") from exc

    if dictionary is None:
        dictionary = shared_dictionary()
    return cls(dictionary, **options)
