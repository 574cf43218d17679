"""
Self-play harness primitives.

- run_case:  play one puzzle (one hidden answer) with a solver, using the
             engine's own `compare` as the feedback oracle.
- run_batch: run many puzzles in sequence (optionally a sample prefix).

Game state lives in a SolverSession, exactly as in an interactive session, so
a batch run exercises the same filter and pool logic a user would.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence

from minimaxle.engine.alphabet import WORD_LENGTH, to_word
from minimaxle.engine.feedback import Hint, compare, format_hints
from minimaxle.solvers.minimax import score
from .session import SolverSession

# Default turn budget (Wordle rules).
WORDLE_MAX_TURNS = 6


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        guesses: Sequence[str],
        solutions: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver names the answer, the pool runs dry,
    or the turn budget is exhausted.

    Args:
        solver:     object with next_guess(state) -> str
        answer:     the hidden word for this case (uppercase)
        guesses:    all words permitted as guesses
        solutions:  the candidate universe (should contain `answer`)
        max_turns:  turn budget

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            turns (list[dict]) with one entry per guess:
                guess, hints  : the guess and its hint string
                pool          : candidates before the guess
                worst         : the guess's worst-case score against that pool
                left          : candidates after the feedback
    """
    _check_turns(max_turns)

    session = SolverSession(solutions, guesses)
    hidden = to_word(answer)
    turns: List[Dict] = []
    success = False

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        # Feedback from `compare` never rules the answer out; an empty pool
        # means the answer wasn't in `solutions` to begin with.
        if not session.candidates:
            break

        state = {
            "turn": turn,
            "history": list(session.history),
            "candidates": session.candidates,
            "allowed": session.guesses,
            "N": WORD_LENGTH,
        }
        guess = solver.next_guess(state)
        word = to_word(guess)
        pool, worst = len(session.candidates), score(session.candidates, word)

        hints = compare(word, hidden)
        session.apply_feedback(word, hints)
        turns.append({
            "guess": guess, "hints": format_hints(hints),
            "pool": pool, "worst": worst, "left": len(session.candidates),
        })

        if all(h == Hint.EXACT for h in hints):
            success = True
            break

    dt = (time.time() - t0) * 1000.0
    return {
        "answer": answer, "success": success, "guesses": len(turns),
        "time_ms": dt, "turns": turns,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        guesses: Sequence[str],
        solutions: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.
    """
    _check_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        r = run_case(solver, ans, guesses=guesses, solutions=solutions, max_turns=max_turns)
        r["solver_id"] = getattr(solver, "id", "?")
        out.append(r)
    return out
