"""
Classification: package re-exports

Public API:
  ClassifyEngine, gaussian_pdf, classify_data, predict_best
"""

from .engine import ClassifyEngine

gaussian_pdf = ClassifyEngine.gaussian_pdf
classify_data = ClassifyEngine.classify
predict_best = ClassifyEngine.predict

__all__ = ["ClassifyEngine", "gaussian_pdf", "classify_data", "predict_best"]
