# apps/cli/run.py
"""
Batch self-play for the minimax solver.

Every sampled answer is played as a game against the engine's own feedback,
so the run shows how fast worst-case ranking shrinks the pool in practice.

Outputs (in --outdir):
  - run_<id>.csv:           one row per turn (pool before, worst case, pool after)
  - run_<id>_manifest.json: solve rate, guess distribution, config, word-list report
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from minimaxle.datasets import load_words, validate_wordlists, pretty_summary
from minimaxle.harness.core import run_case, WORDLE_MAX_TURNS
from minimaxle.harness.io import summarize, write_csv, write_manifest
from minimaxle.solvers import MinimaxSolver

log = logging.getLogger("minimaxle.run")


def main(argv=None):
    ap = argparse.ArgumentParser(description="minimaxle: run self-play experiments")
    ap.add_argument("--solutions", default="all_solutions.txt",
                    help="path to the list of possible hidden words")
    ap.add_argument("--guesses", default="all_guesses.txt",
                    help="path to the list of legal guesses")
    ap.add_argument("--sample", type=int,
                    help="play only this many answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget per game")
    ap.add_argument("--workers", type=int, default=1, help="processes used to score guesses")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Missing or undecodable word lists are fatal
    try:
        rep = validate_wordlists(args.solutions, args.guesses)
        solutions = load_words(args.solutions)
        guesses = load_words(args.guesses)
    except (UnicodeDecodeError, OSError) as e:
        log.error("Cannot load word lists: %s", e)
        raise SystemExit(1)
    log.info(pretty_summary(rep))

    cases = list(solutions)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    solver = MinimaxSolver(workers=args.workers)
    results = []
    bar = tqdm(cases, desc="Solving", unit="game", disable=args.no_progress)
    for ans in bar:
        results.append(run_case(solver, ans, guesses=guesses, solutions=solutions,
                                max_turns=args.max_turns))
        bar.set_postfix(solved=sum(r["success"] for r in results),
                        last=f"{ans}/{results[-1]['guesses']}")

    summary = summarize(results)
    log.info("Solved %d/%d, mean guesses %.3f, distribution %s",
             summary["solved"], summary["num_cases"], summary["mean_guesses"],
             summary["guess_distribution"])

    run_id = time.strftime("%Y%m%dT%H%M%SZ", time.gmtime())
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"))
    manifest_path = write_manifest(summary, vars(args), rep,
                                   str(outdir / f"run_{run_id}_manifest.json"))
    log.info("Wrote %s and %s", csv_path, manifest_path)


if __name__ == "__main__":
    main()
