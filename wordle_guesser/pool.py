"""
pool.py

The candidate pool: words that are still possible answers, with weights.

A pool starts out reading straight through to a shared base mapping
(normally the process-wide Dictionary). The first edit that actually
changes something materializes a private dict, so strategies that share
a dictionary never copy it until a game narrows it.
"""

import numpy as np

from wordle_guesser.patterns import word_letters


def _base_mapping(source):
    if isinstance(source, CandidatePool):
        # private pools are copied; later edits on either side stay separate
        return source._base if source.is_shared else dict(source._own)
    return getattr(source, "mapping", source)


class CandidatePool:
    def __init__(self, source):
        self._base = _base_mapping(source)
        self._own = None

    def _current(self):
        return self._own if self._own is not None else self._base

    def _private(self):
        if self._own is None:
            self._own = dict(self._base)
        return self._own

    @property
    def is_shared(self) -> bool:
        return self._own is None

    def reset(self, source):
        """Start over from *source* (a Dictionary, mapping or another pool)."""
        self._base = _base_mapping(source)
        self._own = None

    def retain(self, guess) -> int:
        """Drop every word inconsistent with *guess*. Returns how many were dropped."""
        current = self._current()
        rejected = [word for word in current if not guess.matches(word)]
        if rejected:
            own = self._private()
            for word in rejected:
                del own[word]
        return len(rejected)

    def discard(self, word) -> bool:
        if word not in self._current():
            return False
        del self._private()[word]
        return True

    def admit(self, word, weight) -> bool:
        if self._current().get(word) == weight:
            return False
        self._private()[word] = weight
        return True

    def weight(self, word) -> int:
        return self._current().get(word, 0)

    def items(self):
        return self._current().items()

    def total_weight(self) -> int:
        return sum(self._current().values())

    def sole_remaining(self):
        current = self._current()
        if len(current) != 1:
            return None
        return next(iter(current))

    def words(self) -> list:
        return sorted(self._current())

    def arrays(self):
        """Sorted words, their (n, 5) letters and int64 weights."""
        current = self._current()
        words = sorted(current)
        weights = np.fromiter((current[w] for w in words), dtype=np.int64, count=len(words))
        return words, word_letters(words), weights

    def __contains__(self, word):
        return word in self._current()

    def __len__(self):
        return len(self._current())

    def __iter__(self):
        return iter(self._current())

    def __repr__(self):
        state = "shared" if self.is_shared else "private"
        return f"CandidatePool({len(self)} words, {state})"
