"""
Dataset-wide normalization: every label's vectors are rescaled jointly, per column.
"""

from __future__ import annotations
import logging
from typing import Union

from gaussian_nb.dataset.base import DatasetUtils as U
from gaussian_nb.types import DataSet
from .minimax import MinMaxScaler
from .strategy import NormalizationStrategy
from .z_score import ZScoreScaler

logger = logging.getLogger(__name__)


class DatasetNormalizer:
	@staticmethod
	def normalize(data_set: DataSet, strategy: Union[str, NormalizationStrategy] = "none") -> DataSet:
		"""
		Return a new DataSet rescaled with `strategy`.

		Label order, vectors per label and vector order are preserved. An empty
		dataset is returned unchanged.
		"""
		s = NormalizationStrategy.parse(strategy)
		X, labels, sizes = U.stack(data_set)
		if s is NormalizationStrategy.NONE or X.shape[0] == 0:
			return U.unstack(X, labels, sizes)
		if s is NormalizationStrategy.MINIMAX:
			Y = MinMaxScaler().fit_transform(X)
		else:
			Y = ZScoreScaler().fit_transform(X)
		logger.debug("normalized %d vectors of dimension %d with %s", X.shape[0], X.shape[1], s.value)
		return U.unstack(Y, labels, sizes)
