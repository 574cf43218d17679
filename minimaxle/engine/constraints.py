"""
Candidate filtering from accumulated feedback.

State:
  - one allowed-letter bitmask per slot (bit k set => letter k may sit here)
  - one required-letter bitmask (letters known to occur somewhere)

The state only ever narrows: slot masks lose bits (or collapse to a single
letter on an exact hit) and the required mask gains bits. It is rebuilt only
by starting a new session.

A word fits iff every letter is allowed in its slot AND every required letter
occurs at least once in the word. The required check is set-based; it does
not count multiplicities.
"""

import logging
from typing import Iterable, List, Sequence

from .alphabet import ALPHABET_SIZE, FULL_MASK, WORD_LENGTH, Word, letter_to_char, to_word
from .feedback import Hint

log = logging.getLogger(__name__)


def _mask_letters(mask: int) -> str:
    return "".join(letter_to_char(k) for k in range(ALPHABET_SIZE) if mask & (1 << k))


class CandidateFilter:
    def __init__(self):
        self.masks: List[int] = [FULL_MASK] * WORD_LENGTH
        self.required: int = 0

    def word_fits(self, word: Word) -> bool:
        present = 0
        for mask, letter in zip(self.masks, word):
            bit = 1 << letter
            if not mask & bit:
                return False
            present |= bit
        return self.required & present == self.required

    def apply_hints(self, guess: Word, hints: Sequence[Hint]) -> None:
        """
        Fold one round of feedback into the filter.

        Slots are processed left to right, so a later ABSENT in the same call
        can still clear a bit from a slot an earlier hint touched.
        """
        for i, (letter, hint) in enumerate(zip(guess, hints)):
            bit = 1 << letter
            if hint == Hint.EXACT:
                self.masks[i] = bit
            elif hint == Hint.MISPLACED:
                self.masks[i] &= ~bit
                self.required |= bit
            else:
                for k in range(WORD_LENGTH):
                    self.masks[k] &= ~bit
        log.debug("filter now %r", self)

    def allowed_letters(self, slot: int) -> str:
        return _mask_letters(self.masks[slot])

    def required_letters(self) -> str:
        return _mask_letters(self.required)

    def __repr__(self) -> str:
        slots = " ".join(f"[{self.allowed_letters(i)}]" for i in range(WORD_LENGTH))
        return f"CandidateFilter({slots} required={self.required_letters() or '-'})"


def filter_candidates(words: Iterable[str], cf: CandidateFilter) -> List[str]:
    """
    Keep only the words that still fit `cf`.

    Args:
      words : iterable of validated dictionary words (uppercase strings)
      cf    : the session's candidate filter

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    return [w for w in words if cf.word_fits(to_word(w))]
