"""
Worst-case bucket scorer (minimax).

Idea:
  For guess g, partition the CURRENT candidates by the feedback each would
  produce. The score is the size of the largest bucket: the number of
  candidates left if the answer is as unhelpful as possible. Lower is better.

Acceleration:
  The pool is converted to a letter array once per ranking round and every
  guess is bucketed with `np.bincount` over vectorized pattern codes. With
  workers > 1 the guess list is split into contiguous chunks and scored in a
  process pool; chunks come back in submission order, so the stable sort
  yields the same ranking as the sequential path.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import List, Sequence, Tuple, Union

import numpy as np

from minimaxle.engine.alphabet import NUM_PATTERNS, Word, to_word
from minimaxle.engine.feedback import Hint, decode
from minimaxle.engine.patterns import pattern_codes, words_to_array

log = logging.getLogger(__name__)

Pool = Union[np.ndarray, Sequence[Word], Sequence[str]]


def _as_array(pool: Pool) -> np.ndarray:
    if isinstance(pool, np.ndarray):
        return pool
    return words_to_array(pool)


def bucket_counts(pool: Pool, guess: Word) -> np.ndarray:
    """
    Count pool words per encoded feedback for `guess`.

    Returns:
      int64 array of length NUM_PATTERNS; index = encoded feedback.
      The counts always sum to len(pool).
    """
    arr = _as_array(pool)
    return np.bincount(pattern_codes(guess, arr), minlength=NUM_PATTERNS)


def score(pool: Pool, guess: Word) -> int:
    """Size of the largest bucket (0 for an empty pool)."""
    return int(bucket_counts(pool, guess).max())


def adversarial_feedback(pool: Pool, guess: Word) -> List[Hint]:
    """
    Feedback of the fullest bucket: what a worst-case oracle would answer.
    On ties the lowest encoded feedback wins (argmax returns the first max).
    """
    return decode(int(np.argmax(bucket_counts(pool, guess))))


def _score_chunk(pool: np.ndarray, guesses: Sequence[str]) -> List[int]:
    return [score(pool, to_word(g)) for g in guesses]


def rank_guesses(pool: Pool, guesses: Sequence[str], workers: int = 1) -> List[Tuple[str, int]]:
    """
    Score every guess against `pool` and sort ascending by score.

    The sort is stable, so equal scores keep the order of `guesses`.

    Args:
      pool    : current candidates (strings, Words or a prebuilt letter array)
      guesses : words to rank (uppercase strings)
      workers : process count for scoring; 1 keeps everything in-process
    """
    arr = _as_array(pool)
    t0 = time.perf_counter()

    if workers > 1 and len(guesses) > workers:
        size = -(-len(guesses) // workers)
        chunks = [guesses[i:i + size] for i in range(0, len(guesses), size)]
        with ProcessPoolExecutor(max_workers=workers) as ex:
            scores = [s for part in ex.map(partial(_score_chunk, arr), chunks) for s in part]
    else:
        scores = _score_chunk(arr, guesses)

    ranked = sorted(zip(guesses, scores), key=lambda ws: ws[1])
    log.debug("ranked %d guesses against %d candidates in %.1f ms",
              len(guesses), len(arr), (time.perf_counter() - t0) * 1000.0)
    return ranked


class MinimaxSolver:
    """
    Self-play policy built on the scorer.

    With one or two candidates left, guess a candidate (it either wins or
    leaves exactly one). Otherwise take the lowest worst-case score over the
    allowed guesses, preferring a word that could itself be the answer.
    """
    id = "minimax"
    name = "Worst-case Bucket Minimax"
    version = "1.0.0"

    def __init__(self, workers: int = 1):
        self.workers = workers

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        if not candidates:
            raise ValueError("no candidates left to guess from")
        if len(candidates) <= 2 or not allowed:
            return candidates[0]

        ranked = rank_guesses(candidates, allowed, workers=self.workers)
        best = ranked[0][1]
        cand_set = set(candidates)
        for word, s in ranked:
            if s != best:
                break
            if word in cand_set:
                return word
        return ranked[0][0]
