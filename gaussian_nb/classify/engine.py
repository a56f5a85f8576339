"""
Naive Gaussian scoring of a query vector against every fitted label.

	score(L | x) = prior(L) · Π_i N(x_i; mean_i, std_i)

Dimensions are treated as independent given the label (no covariance terms).
Scores are unnormalized and used only for ranking.
"""

from __future__ import annotations
from typing import Iterable, Sequence, Tuple
import numpy as np
from scipy.stats import norm

from gaussian_nb.dataset.base import DatasetUtils as U
from gaussian_nb.errors import DimensionMismatchError, NotFittedError
from gaussian_nb.types import DimensionStats, FitResult, Label, Prediction


class ClassifyEngine:
	@staticmethod
	def gaussian_pdf(x: float, mean: float, std: float) -> float:
		"""
		Normal density at x. A zero std is a point mass: 1.0 at the mean, 0.0 elsewhere.
		"""
		if std == 0.0:
			return 1.0 if float(x) == float(mean) else 0.0
		return float(norm.pdf(float(x), loc=float(mean), scale=float(std)))

	@staticmethod
	def likelihood(stats: Sequence[DimensionStats], feature: Sequence[float]) -> float:
		"""Product of per-dimension densities; `feature` must match `stats` in length."""
		if len(stats) != len(feature):
			raise DimensionMismatchError(len(stats), len(feature))
		dens = np.fromiter(
			(ClassifyEngine.gaussian_pdf(x, s.mean, s.standard_deviation) for x, s in zip(feature, stats)),
			dtype=np.float64,
			count=len(stats),
		)
		return float(np.prod(dens))

	@staticmethod
	def classify(fit: FitResult, feature: Iterable[float]) -> Prediction:
		"""
		Score `feature` against every label, in fitted label order.

		Labels fitted on zero vectors score 0.0.
		"""
		if fit.is_empty:
			raise NotFittedError("classifier has not been fitted")
		x = U.to_feature(feature)
		out: Prediction = {}
		for lb, stats in fit.items():
			if len(stats) == 0:
				out[lb] = 0.0
				continue
			out[lb] = fit.prior(lb) * ClassifyEngine.likelihood(stats, x)
		return out

	@staticmethod
	def best(prediction: Prediction) -> Tuple[Label, float]:
		"""
		Highest-scoring (label, score). Stable ascending sort, take the last:
		among tied maxima the label latest in iteration order wins.
		"""
		if len(prediction) == 0:
			raise NotFittedError("no labels to choose from")
		ranked = sorted(prediction.items(), key=lambda kv: kv[1])
		lb, sc = ranked[-1]
		return lb, float(sc)

	@staticmethod
	def predict(fit: FitResult, feature: Iterable[float]) -> Tuple[Label, float]:
		return ClassifyEngine.best(ClassifyEngine.classify(fit, feature))
