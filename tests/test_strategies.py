import pytest

from conftest import recorder
from wordle_guesser.entropy import NoCandidatesError, best_guess
from wordle_guesser.game import play
from wordle_guesser.patterns import Guess, compute, parse_mask
from wordle_guesser.strategies import (
    OPENING_GUESS,
    STRATEGIES,
    Cached,
    Interactive,
    MaskBuckets,
    Memoized,
    Naive,
    make_guesser,
)


SECRETS = ["light", "cigar", "sissy", "night", "wrong", "eight"]


def test_opening_guess_skips_scoring(dictionary):
    for cls in (Naive, Cached, MaskBuckets, Memoized, Interactive):
        assert cls(dictionary).guess([]) == OPENING_GUESS
        assert cls(dictionary, opening="CRATE").guess([]) == "crate"


def test_sole_remaining_is_played(dictionary):
    guesser = MaskBuckets(dictionary)
    guesser.guess([])
    assert guesser.guess([Guess("might", parse_mask("#####"))]) == "might"


def test_shared_dictionary_is_not_copied(dictionary):
    cached = Cached(dictionary)
    naive = Naive(dictionary)
    assert cached.dictionary is dictionary
    assert naive.dictionary is not dictionary
    assert naive.dictionary.words == dictionary.words


def test_variants_play_identical_games(dictionary):
    sequences = {}
    for cls in (Naive, Cached, MaskBuckets, Memoized):
        guesser = cls(dictionary)
        played_games = []
        for secret in SECRETS:
            guess, played = recorder(guesser)
            assert play(secret, guess, dictionary) == len(played)
            played_games.append(played)
        sequences[cls.name] = played_games

    reference = sequences["naive"]
    for name, games in sequences.items():
        assert games == reference, name


def test_games_are_deterministic(dictionary):
    for secret in SECRETS:
        first, played_first = recorder(MaskBuckets(dictionary))
        second, played_second = recorder(MaskBuckets(dictionary))
        assert play(secret, first, dictionary) == play(secret, second, dictionary)
        assert played_first == played_second


def test_pool_shrinks_every_turn(dictionary):
    guesser = MaskBuckets(dictionary)
    sizes = []

    def guess(history):
        word = guesser.guess(history)
        sizes.append(len(guesser.pool))
        return word

    assert play("fight", guess, dictionary) is not None
    assert sizes == sorted(sizes, reverse=True)
    assert sizes[-1] >= 1


def test_memoized_second_guess_is_reused(dictionary, monkeypatch):
    guesser = Memoized(dictionary)
    first = [Guess("tares", compute("night", "tares"))]
    guesser.guess([])
    computed = guesser.guess(first)

    def fail(*args, **kwargs):
        raise AssertionError("second guess was recomputed")

    monkeypatch.setattr("wordle_guesser.strategies.best_guess", fail)
    guesser.guess([])
    assert guesser.guess(first) == computed


def test_memoized_ignores_other_openings(dictionary):
    guesser = Memoized(dictionary)
    guesser.guess([])
    history = [Guess("crate", compute("night", "crate"))]
    guesser.guess(history)
    assert guesser.memo_key(history) is None
    assert all(word is None for word in guesser.second_guesses)


def test_interactive_edits(dictionary):
    guesser = Interactive(dictionary)
    guesser.guess([])
    assert not guesser.dirty

    guesser.remove("crate")
    assert guesser.dirty
    assert "crate" not in guesser.known
    assert "crate" not in guesser.pool
    assert "crate" in dictionary

    guesser.allow("crate")
    assert "crate" in guesser.known
    assert "crate" not in guesser.pool

    guesser.eliminate("slate")
    assert "slate" in guesser.known
    assert "slate" not in guesser.pool

    guesser.consider("slate")
    assert guesser.pool.weight("slate") == dictionary.weight("slate")

    guesser.consider("zzzzz")
    assert guesser.known.weight("zzzzz") == 1
    assert "zzzzz" in guesser.remaining()


def test_interactive_dirty_session_scores_first_guess(dictionary, monkeypatch):
    calls = []

    def spy(*args, **kwargs):
        calls.append(args)
        return best_guess(*args, **kwargs)

    monkeypatch.setattr("wordle_guesser.strategies.best_guess", spy)
    guesser = Interactive(dictionary)
    guesser.eliminate(OPENING_GUESS)
    word = guesser.guess([])

    assert len(calls) == 1
    assert word in guesser.known
    assert OPENING_GUESS not in guesser.pool
    assert OPENING_GUESS in guesser.known


def test_interactive_consider_survives_until_next_feedback(dictionary):
    guesser = Interactive(dictionary)
    guesser.guess([])
    history = [Guess("tares", compute("light", "tares"))]
    guesser.guess(history)
    assert "cigar" not in guesser.pool

    guesser.consider("cigar")
    guesser.guess(history)
    assert "cigar" in guesser.pool

    history.append(Guess("light", compute("night", "light")))
    guesser.guess(history)
    assert "cigar" not in guesser.pool


def test_interactive_hard_mode_guesses_possible_answers(dictionary):
    guesser = Interactive(dictionary)
    guesser.hard()
    history = []
    secret = "tight"
    for _ in range(10):
        word = guesser.guess(history)
        if history:
            assert word in guesser.pool
        if word == secret:
            break
        history.append(Guess(word, compute(secret, word)))
    assert word == secret


def test_interactive_reports_empty_pool(dictionary):
    guesser = Interactive(dictionary)
    guesser.guess([])
    for word in list(guesser.pool):
        guesser.eliminate(word)
    with pytest.raises(NoCandidatesError):
        guesser.guess([])


def test_interactive_new_game_restores_pool(dictionary):
    guesser = Interactive(dictionary)
    guesser.guess([])
    guesser.guess([Guess("tares", compute("light", "tares"))])
    assert len(guesser.pool) < len(dictionary)

    guesser.new_game()
    assert guesser.guess([]) == OPENING_GUESS
    assert len(guesser.pool) == len(dictionary)


def test_make_guesser(dictionary):
    for name, cls in STRATEGIES.items():
        guesser = make_guesser(name, dictionary)
        assert isinstance(guesser, cls)
        assert guesser.name == name


def test_make_guesser_unknown_name(dictionary):
    with pytest.raises(ValueError, match="unknown strategy"):
        make_guesser("random", dictionary)
