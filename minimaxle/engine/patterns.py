"""
Vectorized feedback codes for one guess against many words.

`pattern_codes(guess, pool)` returns, for every row of `pool`, the same
integer as `encode(compare(guess, row))`. The scorer calls it once per guess,
so the whole pool is handled by a handful of numpy ops instead of a Python
loop per word.
"""

from typing import Iterable, Union

import numpy as np

from .alphabet import WORD_LENGTH, Word, to_word

# Radix-3 place values, slot 0 least significant.
_PLACES = 3 ** np.arange(WORD_LENGTH, dtype=np.int64)

# Off-diagonal selector: slot i may be MISPLACED only via some j != i.
_OFF_DIAG = ~np.eye(WORD_LENGTH, dtype=bool)


def words_to_array(words: Iterable[Union[str, Word]]) -> np.ndarray:
    """Stack words (strings or Words) into an (n, WORD_LENGTH) uint8 array."""
    rows = [to_word(w) if isinstance(w, str) else tuple(w) for w in words]
    if not rows:
        return np.empty((0, WORD_LENGTH), dtype=np.uint8)
    return np.asarray(rows, dtype=np.uint8)


def pattern_codes(guess: Word, pool: np.ndarray) -> np.ndarray:
    g = np.asarray(guess, dtype=np.uint8)
    exact = pool == g  # (n, N)
    # eq[n, i, j] = guess[i] == pool[n, j]
    eq = g[None, :, None] == pool[:, None, :]
    misplaced = (eq & _OFF_DIAG).any(axis=2)
    digits = np.where(exact, 0, np.where(misplaced, 1, 2))
    return digits.astype(np.int64) @ _PLACES
