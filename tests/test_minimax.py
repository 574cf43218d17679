import random

import pytest
from minimaxle.engine import compare, encode, format_hints, to_word
from minimaxle.engine.patterns import pattern_codes, words_to_array
from minimaxle.solvers import MinimaxSolver, adversarial_feedback, bucket_counts, rank_guesses, score

POOL = ["CRANE", "TRACE", "GRACE"]
WORDS = ["CRANE", "TRACE", "GRACE", "LEVEL", "HELLO", "EERIE", "THEME", "SPEED",
         "ABIDE", "GUILT", "SISSY", "EEEEE"]


def test_vectorized_codes_match_scalar():
    arr = words_to_array(WORDS)
    for g in WORDS:
        expected = [encode(compare(to_word(g), to_word(h))) for h in WORDS]
        assert pattern_codes(to_word(g), arr).tolist() == expected


def test_bucket_counts_sum_to_pool_size():
    for g in WORDS:
        counts = bucket_counts(WORDS, to_word(g))
        assert counts.sum() == len(WORDS)
        assert len(counts) == 3 ** 5


def test_score_and_adversarial():
    guess = to_word("CRANE")
    # TRACE and GRACE both answer "?1101"
    assert score(POOL, guess) == 2
    assert format_hints(adversarial_feedback(POOL, guess)) == "?1101"


def test_adversarial_tie_picks_lowest_code():
    # buckets {11111: 1, ?1101: 1}; all-exact has the lowest code
    assert format_hints(adversarial_feedback(["CRANE", "TRACE"], to_word("CRANE"))) == "11111"


def test_empty_pool():
    assert score([], to_word("CRANE")) == 0
    assert bucket_counts([], to_word("CRANE")).sum() == 0


def test_score_order_invariant():
    rng = random.Random(5)
    shuffled = list(WORDS)
    for _ in range(5):
        rng.shuffle(shuffled)
        for g in ["CRANE", "EERIE", "GUILT"]:
            assert score(shuffled, to_word(g)) == score(WORDS, to_word(g))


def test_rank_guesses_stable_ascending():
    ranked = rank_guesses(POOL, ["CRANE", "TRACE", "GRACE", "GUILT"])
    assert ranked == [("TRACE", 1), ("GRACE", 1), ("GUILT", 1), ("CRANE", 2)]


def test_rank_guesses_parallel_matches_sequential():
    guesses = WORDS * 3
    assert rank_guesses(WORDS, guesses, workers=2) == rank_guesses(WORDS, guesses)


@pytest.mark.parametrize("candidates,expected", [
    (["GRACE"], "GRACE"),
    (["TRACE", "GRACE"], "TRACE"),
    (POOL, "TRACE"),
])
def test_minimax_solver_next_guess(candidates, expected):
    solver = MinimaxSolver()
    state = {"candidates": candidates, "allowed": ["CRANE", "TRACE", "GRACE", "GUILT"]}
    assert solver.next_guess(state) == expected
