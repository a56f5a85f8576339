from .accuracy import AccuracyScorer

calc_score = AccuracyScorer.score

__all__ = ["AccuracyScorer", "calc_score"]
