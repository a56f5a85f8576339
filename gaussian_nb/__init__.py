"""
Gaussian Naive Bayes: top-level re-exports.

Public API:
  GaussianNB, ClassifierConfig            -> classifier value and its config
  new, add_train_data, normalize_train_data, fit,
  predict_proba, predict, score           -> functional pipeline
  DimensionStats, FitResult               -> fitted parameters
  NormalizationStrategy                   -> none / minimax / z_normalization
  DatasetBuilder                          -> datasets from pairs, arrays, DataFrames
  GaussianNBError and its subclasses      -> typed failures
"""

from .types import DimensionStats, FitResult
from .config import ClassifierConfig
from .errors import (
	GaussianNBError,
	EmptyInputError,
	NotFittedError,
	UnknownNormalizationStrategyError,
	DimensionMismatchError,
)
from .normalize import NormalizationStrategy
from .dataset import DatasetBuilder
from .model import (
	GaussianNB,
	new,
	add_train_data,
	normalize_train_data,
	fit,
	predict_proba,
	predict,
	score,
)

__version__ = "0.1.0"

__all__ = [
	"GaussianNB", "ClassifierConfig",
	"new", "add_train_data", "normalize_train_data", "fit", "predict_proba", "predict", "score",
	"DimensionStats", "FitResult", "NormalizationStrategy", "DatasetBuilder",
	"GaussianNBError", "EmptyInputError", "NotFittedError",
	"UnknownNormalizationStrategyError", "DimensionMismatchError",
]
