"""
Alphabet and word-shape constants, plus char <-> letter conversion.

Conventions:
  - A Letter is an int in [0, ALPHABET_SIZE): 'A' -> 0, ..., 'Z' -> 25.
  - A Word is a tuple of exactly WORD_LENGTH Letters.
  - Dictionary words are stored as uppercase strings and converted to Words
    when they enter the engine.

Everything sized by the alphabet or word length (bitmask width, number of
feedback patterns) is derived here so the pieces stay consistent.
"""

from typing import Tuple

# Single source of truth for the puzzle shape.
ALPHABET_SIZE = 26
WORD_LENGTH = 5

# One bit per letter; a slot that allows every letter has all bits set.
FULL_MASK = (1 << ALPHABET_SIZE) - 1

# Number of distinct feedback vectors (radix-3 digit per slot).
NUM_PATTERNS = 3 ** WORD_LENGTH

Letter = int
Word = Tuple[Letter, ...]

_BASE = ord("A")


def char_to_letter(c: str) -> Letter:
    """
    Map one ASCII letter (either case) to its Letter number.

    Raises:
      ValueError if `c` is not a single ASCII alphabetic character.
    """
    if len(c) != 1 or not (c.isascii() and c.isalpha()):
        raise ValueError(f"Invalid character: {c}")
    return ord(c.upper()) - _BASE


def letter_to_char(letter: Letter) -> str:
    assert 0 <= letter < ALPHABET_SIZE, f"letter out of range: {letter}"
    return chr(_BASE + letter)


def to_word(s: str) -> Word:
    """
    Convert a guess string to a Word.

    The length check runs first, so "ab" reports the length problem rather
    than complaining about characters.

    Raises:
      ValueError naming the required length or the first invalid character.
    """
    if len(s) != WORD_LENGTH:
        raise ValueError(f"Guessed word must be {WORD_LENGTH} character(s) long")
    return tuple(char_to_letter(ch) for ch in s)


def word_to_str(word: Word) -> str:
    return "".join(letter_to_char(x) for x in word)


def is_valid_word(s: str) -> bool:
    """True iff `s` has the puzzle length and only ASCII letters."""
    return len(s) == WORD_LENGTH and s.isascii() and s.isalpha()
