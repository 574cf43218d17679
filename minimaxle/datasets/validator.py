"""
Word-list validator for minimaxle.

What this module does:
- Inspect a pair of word lists: the solutions list (possible hidden words) and
  the guesses list (legal guesses, normally a superset).
- Count the lines the loader would drop (wrong length, non-letters, blanks).
- Detect duplicates; compute SHA-256 of the raw files.
- Check that solutions ⊆ guesses.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

The solver itself never needs a clean report: `load_words` silently drops
unusable lines. The report exists so a bad path or a wrong-length list is
obvious before a long session or batch starts.

Typical use:
    from minimaxle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("all_solutions.txt", "all_guesses.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from minimaxle.engine.alphabet import WORD_LENGTH, is_valid_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of usable words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique usable words (after uppercasing)
    dropped_lines: int   # lines the loader will skip


@dataclass
class ValidationReport:
    """Top-level validation result for the (solutions, guesses) pair."""
    N: int
    solutions: FileReport
    guesses: FileReport
    solutions_subset_guesses: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file the same way the solver does.

    Returns:
      (usable_words_uppercased, dropped_count)
    """
    valid: List[str] = []
    dropped = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if is_valid_word(w):
                valid.append(w.upper())
            else:
                dropped += 1

    return valid, dropped


def _report(path: Path, words: List[str], dropped: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        dropped_lines=dropped,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(solutions_path: str, guesses_path: str) -> Dict:
    """
    Validate the solutions/guesses word lists for the fixed word length.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/dropped diagnostics
          - solutions ⊆ guesses check
          - `passed` (both lists non-empty and the subset check holds)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    sol_p = Path(solutions_path)
    gue_p = Path(guesses_path)

    if not sol_p.exists() or not gue_p.exists():
        if not sol_p.exists():
            issues.append(f"solutions file not found: {solutions_path}")
        if not gue_p.exists():
            issues.append(f"guesses file not found: {guesses_path}")
        rep = ValidationReport(
            N=WORD_LENGTH,
            solutions=FileReport(solutions_path, sol_p.exists(), 0, "", 0, 0),
            guesses=FileReport(guesses_path, gue_p.exists(), 0, "", 0, 0),
            solutions_subset_guesses=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    solutions, sol_dropped = _load_and_check(sol_p)
    guesses, gue_dropped = _load_and_check(gue_p)
    sol_report = _report(sol_p, solutions, sol_dropped)
    gue_report = _report(gue_p, guesses, gue_dropped)

    missing = set(solutions) - set(guesses)
    subset_ok = not missing
    if not subset_ok:
        # A few examples are enough to spot the problem
        issues.append(f"solutions not subset of guesses (e.g., {sorted(missing)[:5]})")

    if sol_report.count == 0:
        issues.append("solutions file contains 0 usable words")
    if gue_report.count == 0:
        issues.append("guesses file contains 0 usable words")

    if sol_dropped:
        issues.append(f"solutions has {sol_dropped} dropped line(s)")
    if gue_dropped:
        issues.append(f"guesses has {gue_dropped} dropped line(s)")

    if sol_report.count != sol_report.unique_count:
        issues.append("solutions contains duplicate words")
    if gue_report.count != gue_report.unique_count:
        issues.append("guesses contains duplicate words")

    # Dropped lines and duplicates are warnings; the solver copes with both.
    passed = subset_ok and sol_report.count > 0 and gue_report.count > 0

    rep = ValidationReport(
        N=WORD_LENGTH,
        solutions=sol_report,
        guesses=gue_report,
        solutions_subset_guesses=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        N=5 | solutions=2315 (uniq=2315, sha=abc123...) | guesses=12972 (uniq=12972, sha=def456...) | solutions⊆guesses=True | OK
    """
    a = report["solutions"]
    b = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | solutions={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guesses={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| solutions⊆guesses={report['solutions_subset_guesses']} | {status}"
    )
