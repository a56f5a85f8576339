"""DatasetBuilder
Construct DataSets from pairs, NumPy arrays or pandas frames, and flatten them back.

  • from_pairs  : replay (label, vector) pairs through DatasetUtils.put
  • from_arrays : group rows of X by y in sorted label order
  • from_frame  : from_arrays over a DataFrame with one label column
  • to_arrays   : (X, y) with rows grouped by label in dataset order
"""

from __future__ import annotations
from typing import Iterable, Tuple
import numpy as np
import pandas as pd

from gaussian_nb.errors import DimensionMismatchError
from gaussian_nb.types import DataSet, Label
from .base import DatasetUtils as U


class DatasetBuilder:
	@staticmethod
	def from_pairs(pairs: Iterable[Tuple[Label, Iterable[float]]]) -> DataSet:
		ds: DataSet = {}
		for lb, v in pairs:
			ds = U.put(ds, lb, v)
		return ds

	@staticmethod
	def from_arrays(X, y) -> DataSet:
		"""
		Bin the rows of an (n, D) matrix by label with a deterministic label order.
		"""
		Xa = np.asarray(X, dtype=np.float64)
		if Xa.ndim == 1:
			Xa = Xa.reshape(-1, 1)
		ya = np.asarray(y).reshape(-1)
		if Xa.shape[0] != ya.shape[0]:
			raise DimensionMismatchError(Xa.shape[0], ya.shape[0], "label array")
		labels = np.unique(ya)
		out: DataSet = {}
		for i in range(labels.shape[0]):
			lb = labels[i]
			idx = np.nonzero(ya == lb)[0]
			key = lb.item() if isinstance(lb, np.generic) else lb
			out[key] = tuple(U.to_feature(Xa[j]) for j in idx)
		return out

	@staticmethod
	def from_frame(df: pd.DataFrame, label_column: str) -> DataSet:
		"""
		Build a DataSet from a DataFrame; every column except `label_column` is a feature.
		"""
		if label_column not in df.columns:
			raise KeyError(f"Missing label column: {label_column}")
		feats = df.drop(columns=[label_column])
		return DatasetBuilder.from_arrays(feats.to_numpy(dtype=np.float64), df[label_column].to_numpy())

	@staticmethod
	def to_arrays(data_set: DataSet) -> tuple[np.ndarray, np.ndarray]:
		X, labels, sizes = U.stack(data_set)
		y: list = []
		for lb, n in zip(labels, sizes):
			y.extend([lb] * int(n))
		return X, np.asarray(y, dtype=object)
