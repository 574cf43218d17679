"""
One solving session: the candidate filter, the current pool, and the
line-based prompt loop that drives them.

- SolverSession:   state + operations (worst feedback, apply, rankings).
- run_interactive: the prompt protocol over any text streams, so the CLI
                   uses stdin/stdout and tests use StringIO.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Sequence, TextIO, Tuple

from minimaxle.engine.alphabet import Word, to_word, word_to_str
from minimaxle.engine.constraints import CandidateFilter, filter_candidates
from minimaxle.engine.feedback import Hint, describe_hints, format_hints, parse_hint_string
from minimaxle.solvers.minimax import adversarial_feedback, rank_guesses

log = logging.getLogger(__name__)

# How many recommendations to print per round.
TOP_GUESSES = 100
TOP_FINAL = 20

GUESS_PROMPT = "Next Word for guessing:"
HINT_PROMPT = "Hints for this word: (1 = here, 0 = nowhere, ? = elsewhere)"


class SessionStatus(enum.Enum):
    ACTIVE = "active"
    SOLVED = "solved"        # exactly one candidate left
    EXHAUSTED = "exhausted"  # no candidate fits the feedback


class SolverSession:
    def __init__(self, solutions: Sequence[str], guesses: Sequence[str], *, workers: int = 1):
        self.solutions: List[str] = list(solutions)
        self.guesses: List[str] = list(guesses)
        self.workers = workers
        self.filter = CandidateFilter()
        self.candidates: List[str] = list(self.solutions)
        self.history: List[Tuple[str, str]] = []

    @property
    def status(self) -> SessionStatus:
        if not self.candidates:
            return SessionStatus.EXHAUSTED
        if len(self.candidates) == 1:
            return SessionStatus.SOLVED
        return SessionStatus.ACTIVE

    @property
    def solution(self) -> Optional[str]:
        return self.candidates[0] if self.status is SessionStatus.SOLVED else None

    def worst_feedback(self, guess: Word) -> List[Hint]:
        return adversarial_feedback(self.candidates, guess)

    def apply_feedback(self, guess: Word, hints: Sequence[Hint]) -> List[str]:
        """
        Fold real feedback into the filter and re-derive the pool from the
        full solutions list. Returns the new pool.
        """
        self.filter.apply_hints(guess, hints)
        self.candidates = filter_candidates(self.solutions, self.filter)
        self.history.append((word_to_str(guess), format_hints(hints)))
        log.info("%d candidate(s) remain", len(self.candidates))
        return self.candidates

    def best_guesses(self, limit: int = TOP_GUESSES) -> List[Tuple[str, int]]:
        """Whole guess dictionary ranked against the pool (narrowing moves)."""
        return rank_guesses(self.candidates, self.guesses, workers=self.workers)[:limit]

    def final_guesses(self, limit: int = TOP_FINAL) -> List[Tuple[str, int]]:
        """Pool words ranked against the pool (guesses that might also win)."""
        return rank_guesses(self.candidates, self.candidates, workers=self.workers)[:limit]


def _format_ranking(ranked: Sequence[Tuple[str, int]]) -> str:
    return ", ".join(f"{w} ({s})" for w, s in ranked)


def _ask(prompt: str, parse, stdin: TextIO, stdout: TextIO):
    """Prompt until `parse` accepts a line; None on end of input."""
    while True:
        print(prompt, file=stdout)
        line = stdin.readline()
        if not line:
            return None
        try:
            return parse(line.strip())
        except ValueError as e:
            print(e, file=stdout)


def run_interactive(
        session: SolverSession,
        stdin: TextIO,
        stdout: TextIO,
        *,
        top_guesses: int = TOP_GUESSES,
        top_final: int = TOP_FINAL,
) -> SessionStatus:
    """
    Drive `session` until one word is left, none is left, or input runs out.

    Returns the session status at exit (ACTIVE only when input ended early).
    """
    while True:
        if session.status is SessionStatus.EXHAUSTED:
            print("No words found.", file=stdout)
            return session.status
        if session.status is SessionStatus.SOLVED:
            print(f"Finally found word {session.solution}", file=stdout)
            return session.status

        guess = _ask(GUESS_PROMPT, to_word, stdin, stdout)
        if guess is None:
            break

        worst = session.worst_feedback(guess)
        print(f"Worst hint: {format_hints(worst)} ({describe_hints(worst)})", file=stdout)

        hints = _ask(HINT_PROMPT, parse_hint_string, stdin, stdout)
        if hints is None:
            break

        print("Computing words...\n", file=stdout)
        session.apply_feedback(guess, hints)

        print("Guesses for quickly reducing the search space:", file=stdout)
        print(_format_ranking(session.best_guesses(top_guesses)), "\n", file=stdout)
        print("Final guesses:", file=stdout)
        print(_format_ranking(session.final_guesses(top_final)), "\n", file=stdout)

    log.info("Input ended with %d candidate(s) left", len(session.candidates))
    return session.status
