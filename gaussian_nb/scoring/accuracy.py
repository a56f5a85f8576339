from __future__ import annotations
import logging
from typing import Optional

from gaussian_nb.classify import ClassifyEngine
from gaussian_nb.dataset.base import DatasetUtils as U
from gaussian_nb.errors import EmptyInputError
from gaussian_nb.types import DataSet, FitResult

logger = logging.getLogger(__name__)


class AccuracyScorer:
	"""Training-set accuracy: the share of training vectors predicted back to their own label."""

	@staticmethod
	def score(fit: FitResult, data_set: DataSet, digits: Optional[int] = None) -> float:
		total = U.total(data_set)
		if total == 0:
			raise EmptyInputError("no data to score")
		hits = 0
		for lb, vectors in data_set.items():
			for v in vectors:
				pred, _ = ClassifyEngine.predict(fit, v)
				if pred == lb:
					hits += 1
		acc = float(hits) / float(total)
		logger.debug("score: %d/%d correct", hits, total)
		if digits is not None:
			acc = round(acc, int(digits))
		return acc
