from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from minimaxle.engine.alphabet import is_valid_word

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist; UnicodeDecodeError
    if it isn't valid UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Load a word list for the solver: keep lines of the puzzle length made of
    ASCII letters only, uppercased, in file order. Anything else is dropped.
    """
    lines = read_lines(p)
    words = [ln.upper() for ln in lines if is_valid_word(ln)]
    log.info("Loaded %d words from %s (%d lines dropped)", len(words), p, len(lines) - len(words))
    return words
