"""
entropy.py

Scores guesses by the entropy of the feedback partition they induce on the
candidate pool, and picks the best one.

Two ways of building the 243-bucket partition are provided:

    naive   - for each of the 243 masks, rescan the pool with Guess.matches()
    buckets - compute each candidate's mask once and bincount the codes

Both produce the same counts, so both pick the same guess.
"""

import multiprocessing as mp
from collections import namedtuple

import numpy as np
from tqdm import tqdm

from wordle_guesser.patterns import NUM_PATTERNS, Guess, all_patterns, pattern_codes


# Goodness gaps below this are treated as floating-point noise
EPSILON = 1e-13

PARTITIONS = ("naive", "buckets")

_PATTERNS = all_patterns()
_WORKER_STATE = {}


Candidate = namedtuple("Candidate", ["word", "goodness", "in_pool", "weight"])


class NoCandidatesError(RuntimeError):
    """No word is left in the candidate pool, or nothing to guess."""


def entropy_from_counts(counts):
    """Compute Shannon entropy from bucket counts. Empty buckets contribute nothing."""
    total = counts.sum()
    if total == 0:
        return 0.0
    probs = counts[counts > 0] / total
    return float(-np.sum(probs * np.log2(probs)))


def naive_partition(word, pool_items):
    """Bucket weights for *word*, summed mask by mask over the whole pool."""
    counts = np.zeros(NUM_PATTERNS, dtype=np.float64)
    for code, pattern in enumerate(_PATTERNS):
        g = Guess(word, pattern)
        counts[code] = sum(weight for candidate, weight in pool_items if g.matches(candidate))
    return counts


def bucket_partition(word, letters, weights):
    """Bucket weights for *word* from one pass over the pool."""
    return np.bincount(pattern_codes(word, letters), weights=weights, minlength=NUM_PATTERNS)


def is_better(challenger, incumbent):
    """
    Total order over scored guesses.

    1. Higher goodness, if the gap is larger than EPSILON.
    2. A word that could still be the answer.
    3. The more frequent word.
    4. The lexicographically smaller word.
    """
    if challenger.goodness > incumbent.goodness + EPSILON:
        return True
    if incumbent.goodness > challenger.goodness + EPSILON:
        return False
    if challenger.in_pool != incumbent.in_pool:
        return challenger.in_pool
    if challenger.weight != incumbent.weight:
        return challenger.weight > incumbent.weight
    return challenger.word < incumbent.word


def _score_range(state, start, end, progress=False):
    """Every word of universe[start:end] as a Candidate, in word order."""
    universe = state["universe"]
    scored = []

    for idx in tqdm(range(start, end), desc="Scoring guesses", leave=False, disable=not progress):
        word = universe[idx]
        if state["partition"] == "naive":
            counts = naive_partition(word, state["pool_items"])
        else:
            counts = bucket_partition(word, state["letters"], state["weights"])

        scored.append(Candidate(
            word,
            entropy_from_counts(counts),
            word in state["pool_words"],
            state["universe_weights"][idx],
        ))

    return scored


def _fold(best, candidates):
    for candidate in candidates:
        if best is None or is_better(candidate, best):
            best = candidate
    return best


def _init_worker(state):
    _WORKER_STATE.update(state)


def _worker_chunk(task):
    start, end = task
    return _score_range(_WORKER_STATE, start, end)


def _build_state(universe, pool, dictionary, partition):
    pool_words, letters, weights = pool.arrays()
    universe = sorted(universe)
    return {
        "partition": partition,
        "universe": universe,
        "universe_weights": [dictionary.weight(w) for w in universe],
        "pool_words": set(pool_words),
        "pool_items": list(zip(pool_words, weights.tolist())),
        "letters": letters,
        "weights": weights,
    }


def best_guess(universe, pool, dictionary, partition="buckets", workers=1, progress=False):
    """
    The most informative word of *universe* against *pool*.

    Words are scored in lexicographic order and folded one by one with
    is_better(), so the result does not depend on iteration order. With
    workers > 1 the universe is split into contiguous chunks; workers send
    back every scored word of their chunk and the parent folds them in the
    same order, so the winner is the one a single process would pick.

    A pool whose words all weigh 0 scores every guess at 0 bits; the tie
    rules then settle on a word that can still be the answer.
    """
    if partition not in PARTITIONS:
        raise ValueError(f"unknown partition method: {partition!r}")
    if len(pool) == 0:
        raise NoCandidatesError("no candidates left in the pool")

    state = _build_state(universe, pool, dictionary, partition)
    n_words = len(state["universe"])
    if n_words == 0:
        raise NoCandidatesError("guess universe is empty")

    workers = max(1, int(workers))
    if workers == 1 or n_words < workers:
        return _fold(None, _score_range(state, 0, n_words, progress=progress))

    chunk_size = -(-n_words // (workers * 4))
    tasks = [(start, min(start + chunk_size, n_words)) for start in range(0, n_words, chunk_size)]

    start_methods = mp.get_all_start_methods()
    ctx = mp.get_context("fork" if "fork" in start_methods else "spawn")

    best = None
    with ctx.Pool(processes=workers, initializer=_init_worker, initargs=(state,)) as worker_pool:
        results = worker_pool.imap(_worker_chunk, tasks)
        for chunk in tqdm(results, total=len(tasks), desc="Scoring chunks", leave=False, disable=not progress):
            best = _fold(best, chunk)
    return best
