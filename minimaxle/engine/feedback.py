"""
Per-letter feedback for a single (guess, hidden) pair, and its encodings.

Conventions:
  - EXACT     ('1') : letter is correct and in the correct slot
  - MISPLACED ('?') : letter occurs at some other slot of the hidden word
  - ABSENT    ('0') : letter occurs nowhere else in the hidden word

Algorithm (pairwise scan):
  For every slot i, look for the guessed letter at any other slot j of the
  hidden word; if found the slot is MISPLACED. An exact hit at slot i
  overrides that. The scan does not cap MISPLACED by how many copies of the
  letter the hidden word actually has, so a guess with two E's against a
  word with one E may report both as MISPLACED. Constraint filtering and
  scoring both rely on this exact behaviour; keep them in sync if it changes.

Encoding:
  A feedback vector is a radix-3 number, slot 0 least significant digit,
  EXACT=0, MISPLACED=1, ABSENT=2. Range is [0, NUM_PATTERNS).
"""

from enum import IntEnum
from typing import Dict, List, Sequence

from .alphabet import NUM_PATTERNS, WORD_LENGTH, Word


class Hint(IntEnum):
    EXACT = 0
    MISPLACED = 1
    ABSENT = 2


# User notation for hints, as typed at the prompt.
HINT_CHARS: Dict[str, Hint] = {"1": Hint.EXACT, "?": Hint.MISPLACED, "0": Hint.ABSENT}
_HINT_TO_CHAR: Dict[Hint, str] = {h: ch for ch, h in HINT_CHARS.items()}


def compare(guess: Word, hidden: Word) -> List[Hint]:
    """
    Compute the feedback vector for `guess` against `hidden`.

    Examples (as hint strings):
      compare(CRANE, TRACE) -> "?1101"
      compare(EERIE, THEME) -> "??001"  (no multiplicity capping)
    """
    assert len(guess) == len(hidden) == WORD_LENGTH, "words must have WORD_LENGTH letters"

    result = [Hint.ABSENT] * WORD_LENGTH
    for i, g in enumerate(guess):
        for j, h in enumerate(hidden):
            if i != j and g == h:
                result[i] = Hint.MISPLACED
                break
        # Exact position wins over an occurrence elsewhere
        if g == hidden[i]:
            result[i] = Hint.EXACT
    return result


def encode(hints: Sequence[Hint]) -> int:
    code = 0
    place = 1
    for h in hints:
        code += int(h) * place
        place *= 3
    return code


def decode(code: int) -> List[Hint]:
    """Inverse of `encode`. Codes outside [0, NUM_PATTERNS) are a bug upstream."""
    assert 0 <= code < NUM_PATTERNS, f"encoded feedback out of range: {code}"
    out: List[Hint] = []
    for _ in range(WORD_LENGTH):
        out.append(Hint(code % 3))
        code //= 3
    return out


def parse_hint_string(s: str) -> List[Hint]:
    """
    Parse user feedback such as "1?00?".

    Raises:
      ValueError on wrong length or on any character outside '1', '?', '0'.
    """
    if len(s) != WORD_LENGTH:
        raise ValueError(f"Hints must be {WORD_LENGTH} character(s) long")
    out: List[Hint] = []
    for ch in s:
        try:
            out.append(HINT_CHARS[ch])
        except KeyError:
            raise ValueError(
                f"Invalid character {ch}, only '0', '1' and '?' allowed") from None
    return out


def format_hints(hints: Sequence[Hint]) -> str:
    return "".join(_HINT_TO_CHAR[Hint(h)] for h in hints)


def describe_hints(hints: Sequence[Hint]) -> str:
    """Readable names, e.g. "exact, absent, misplaced, absent, exact"."""
    return ", ".join(Hint(h).name.lower() for h in hints)
