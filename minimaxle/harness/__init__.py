from .core import run_case, run_batch
from .io import write_csv, write_manifest, summarize
from .session import SolverSession, SessionStatus, run_interactive

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest", "summarize",
           "SolverSession", "SessionStatus", "run_interactive"]
