from .alphabet import WORD_LENGTH, ALPHABET_SIZE, NUM_PATTERNS, to_word, word_to_str
from .feedback import Hint, compare, encode, decode, parse_hint_string, format_hints
from .constraints import CandidateFilter, filter_candidates

__all__ = [
    "WORD_LENGTH", "ALPHABET_SIZE", "NUM_PATTERNS", "to_word", "word_to_str",
    "Hint", "compare", "encode", "decode", "parse_hint_string", "format_hints",
    "CandidateFilter", "filter_candidates",
]
