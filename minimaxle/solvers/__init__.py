from .minimax import MinimaxSolver, bucket_counts, score, adversarial_feedback, rank_guesses

__all__ = ["MinimaxSolver", "bucket_counts", "score", "adversarial_feedback", "rank_guesses"]
