"""
patterns.py

Computes and checks Wordle feedback masks.

A mask holds one Correctness value per letter of a guess:

    0 = WRONG     (gray)
    1 = MISPLACED (yellow)
    2 = CORRECT   (green)

Masks are encoded as base-3 integers 0..242 with the first letter as the
most significant digit, so a whole partition of the candidate pool fits in
a flat 243-slot array.
"""

from dataclasses import dataclass
from enum import IntEnum
from itertools import product

import numpy as np


WORD_LENGTH = 5
NUM_PATTERNS = 3**WORD_LENGTH

# Place value of each letter position in the base-3 code
_PLACE_VALUES = np.array([3 ** (WORD_LENGTH - 1 - i) for i in range(WORD_LENGTH)], dtype=np.int64)

MASK_SYMBOLS = {"-": 0, "+": 1, "#": 2}
TILES = ("⬛", "\U0001f7e8", "\U0001f7e9")


class Correctness(IntEnum):
    WRONG = 0
    MISPLACED = 1
    CORRECT = 2


def _claim_misplaced(letter, secret, used):
    """Mark the first unused slot of *secret* holding *letter*. True if one was found."""
    for i in range(WORD_LENGTH):
        if secret[i] == letter and not used[i]:
            used[i] = True
            return True
    return False


def compute(secret: str, guess: str) -> tuple:
    """
    Feedback mask for *guess* against *secret*.

    1. Greens first: each exact match consumes its slot in the secret.

    2. Then every remaining position scans the secret left to right for an
       unused slot with the same letter. A hit is yellow and consumes that
       slot, so repeated letters are capped by their count in the secret.
    """
    mask = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    for i in range(WORD_LENGTH):
        if secret[i] == guess[i]:
            mask[i] = Correctness.CORRECT
            used[i] = True

    for i in range(WORD_LENGTH):
        if mask[i] == Correctness.CORRECT:
            continue
        if _claim_misplaced(guess[i], secret, used):
            mask[i] = Correctness.MISPLACED

    return tuple(mask)


@dataclass(frozen=True)
class Guess:
    """One turn of history: the word that was played and the mask it received."""

    word: str
    mask: tuple

    def __post_init__(self):
        if len(self.word) != WORD_LENGTH or len(self.mask) != WORD_LENGTH:
            raise ValueError(f"guess and mask must have {WORD_LENGTH} positions: {self.word!r}")
        object.__setattr__(self, "mask", tuple(Correctness(m) for m in self.mask))

    def matches(self, candidate: str) -> bool:
        """
        True if *candidate* could be the secret given this feedback.

        Same two passes as compute(), but bails out on the first position
        that disagrees with the recorded mask instead of building a mask.
        """
        used = [False] * WORD_LENGTH

        for i in range(WORD_LENGTH):
            if self.word[i] == candidate[i]:
                if self.mask[i] != Correctness.CORRECT:
                    return False
                used[i] = True
            elif self.mask[i] == Correctness.CORRECT:
                return False

        for i in range(WORD_LENGTH):
            if self.mask[i] == Correctness.CORRECT:
                continue
            misplaced = _claim_misplaced(self.word[i], candidate, used)
            if misplaced != (self.mask[i] == Correctness.MISPLACED):
                return False

        return True


def encode_mask(mask) -> int:
    code = 0
    for m in mask:
        code = code * 3 + int(m)
    return code


def decode_mask(code: int) -> tuple:
    if not 0 <= code < NUM_PATTERNS:
        raise ValueError(f"mask code out of range: {code}")
    digits = []
    for _ in range(WORD_LENGTH):
        code, digit = divmod(code, 3)
        digits.append(Correctness(digit))
    return tuple(reversed(digits))


def all_patterns():
    """All 243 masks, in encode_mask() order."""
    return [tuple(p) for p in product(Correctness, repeat=WORD_LENGTH)]


def word_letters(words) -> np.ndarray:
    """Pack 5-letter ASCII words into an (n, 5) uint8 array."""
    if not words:
        return np.empty((0, WORD_LENGTH), dtype=np.uint8)
    raw = "".join(words).encode("ascii")
    return np.frombuffer(raw, dtype=np.uint8).reshape(len(words), WORD_LENGTH).copy()


def pattern_codes(guess: str, letters: np.ndarray) -> np.ndarray:
    """
    Encoded masks of *guess* against every row of *letters* at once.

    Vectorized form of compute(): the green pass is a single comparison,
    and the yellow pass claims, per position, the first still-unused slot
    holding the guessed letter in every candidate row.
    """
    g = np.frombuffer(guess.encode("ascii"), dtype=np.uint8)
    n = letters.shape[0]
    rows = np.arange(n)

    green = letters == g
    digits = np.where(green, 2, 0).astype(np.int64)
    unused = ~green

    for i in range(WORD_LENGTH):
        hits = unused & (letters == g[i])
        first = hits.argmax(axis=1)
        found = hits[rows, first] & ~green[:, i]
        digits[found, i] = 1
        unused[rows[found], first[found]] = False

    return digits @ _PLACE_VALUES


def parse_mask(text: str) -> tuple:
    """Parse a '-', '+', '#' mask literal such as '-#+--'."""
    if len(text) != WORD_LENGTH or any(ch not in MASK_SYMBOLS for ch in text):
        raise ValueError(f"not a mask literal: {text!r}")
    return tuple(Correctness(MASK_SYMBOLS[ch]) for ch in text)


def format_mask(mask) -> str:
    symbols = {v: k for k, v in MASK_SYMBOLS.items()}
    return "".join(symbols[int(m)] for m in mask)


def render_mask(mask) -> str:
    return "".join(TILES[int(m)] for m in mask)


def is_solved(mask) -> bool:
    return all(m == Correctness.CORRECT for m in mask)
