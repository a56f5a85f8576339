from __future__ import annotations
import logging
from typing import Dict, Tuple
import numpy as np

from gaussian_nb.dataset.base import DatasetUtils as U
from gaussian_nb.errors import EmptyInputError
from gaussian_nb.stats import Moments
from gaussian_nb.types import DataSet, DimensionStats, FitResult, Label

logger = logging.getLogger(__name__)


class GaussianFitter:
	"""
	Per-label, per-dimension Gaussian parameters.

	Each label's vectors are transposed into columns and summarized with
	Moments.describe. Labels without vectors get an empty stats tuple.
	"""

	@staticmethod
	def fit(data_set: DataSet) -> FitResult:
		if U.total(data_set) == 0:
			raise EmptyInputError("no training data to fit")
		dim = U.dimension(data_set)
		features: Dict[Label, Tuple[DimensionStats, ...]] = {}
		for lb, vectors in data_set.items():
			features[lb] = GaussianFitter._fit_label(vectors, int(dim))
		fr = FitResult(features=features, counts=U.counts(data_set))
		logger.debug("fitted %d labels over %d vectors of dimension %d", len(features), fr.total, dim)
		return fr

	@staticmethod
	def _fit_label(vectors, dim: int) -> Tuple[DimensionStats, ...]:
		if len(vectors) == 0:
			return ()
		M = np.asarray(vectors, dtype=np.float64).reshape(len(vectors), dim)
		return tuple(Moments.describe(M[:, j]) for j in range(dim))
