# apps/cli/play.py
"""
Interactive minimax solver.

This script:
  1) Reports on the word lists (counts, SHA, solutions ⊆ guesses).
  2) Loads the solutions and guesses lists (uppercased, wrong shapes dropped).
  3) Runs the prompt loop: type a guess, see the worst-case hint, type the
     real hint, get ranked suggestions. Stops when one word or none is left.

Usage:
    python -m apps.cli.play --solutions all_solutions.txt --guesses all_guesses.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from minimaxle.datasets import load_words, validate_wordlists, pretty_summary
from minimaxle.harness.session import SolverSession, run_interactive, TOP_GUESSES, TOP_FINAL

log = logging.getLogger("minimaxle.play")


def main(argv=None):
    ap = argparse.ArgumentParser(description="minimaxle: interactive worst-case Wordle solver")
    ap.add_argument("--solutions", default="all_solutions.txt",
                    help="path to the list of possible hidden words")
    ap.add_argument("--guesses", default="all_guesses.txt",
                    help="path to the list of legal guesses (should be a superset of solutions)")
    ap.add_argument("--top-guesses", type=int, default=TOP_GUESSES,
                    help="how many narrowing guesses to show per round")
    ap.add_argument("--top-final", type=int, default=TOP_FINAL,
                    help="how many candidate words to show per round")
    ap.add_argument("--workers", type=int, default=1,
                    help="processes used to score guesses (1 = no pool)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Word lists are required; there is no partial-dictionary fallback.
    try:
        rep = validate_wordlists(args.solutions, args.guesses)
        log.info(pretty_summary(rep))
        for issue in rep["issues"]:
            log.warning(issue)
        solutions = load_words(args.solutions)
        guesses = load_words(args.guesses)
    except FileNotFoundError as e:
        log.error("File %s not found!", e.args[0] if e.args else e)
        raise SystemExit(1)
    except (UnicodeDecodeError, OSError) as e:
        log.error("Error reading word lists: %s", e)
        raise SystemExit(1)

    session = SolverSession(solutions, guesses, workers=args.workers)
    run_interactive(session, sys.stdin, sys.stdout,
                    top_guesses=args.top_guesses, top_final=args.top_final)


if __name__ == "__main__":
    main()
