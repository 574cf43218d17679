"""
Report writers for self-play runs.

- write_csv:      one row per turn, so the shrinking pool can be read off
                  turn by turn (pool before, worst-case score, pool after).
- summarize:      aggregate a batch: solve rate, guess distribution, how often
                  the real feedback hit the worst-case bucket.
- write_manifest: summary + run configuration as JSON.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List
import csv
import json

TURN_FIELDS = ["answer", "turn", "guess", "hints", "pool", "worst", "left"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Flatten `run_case` results into per-turn rows; returns the path written.

    Hint strings get a leading apostrophe so spreadsheets keep "01101" as text.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=TURN_FIELDS)
        w.writeheader()
        for r in results:
            for n, t in enumerate(r["turns"], 1):
                w.writerow({**t, "answer": r["answer"], "turn": n, "hints": "'" + t["hints"]})

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    solved = [r for r in results if r["success"]]
    turns = [t for r in results for t in r["turns"]]
    # A turn "hit the worst case" when the pool shrank only to the largest bucket
    worst_hits = sum(1 for t in turns if t["left"] == t["worst"])
    return {
        "num_cases": len(results),
        "solved": len(solved),
        "mean_guesses": sum(r["guesses"] for r in solved) / len(solved) if solved else 0.0,
        "guess_distribution": {str(k): v for k, v in sorted(Counter(r["guesses"] for r in solved).items())},
        "worst_case_turns": worst_hits,
        "total_turns": len(turns),
    }


def write_manifest(summary: Dict, config: Dict, wordlists: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump({"summary": summary, "config": config, "wordlists": wordlists}, f, indent=2)
    return str(p)
