from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple, Union
import numpy as np

from gaussian_nb.errors import DimensionMismatchError
from gaussian_nb.types import DataSet, Feature, Label

"""
DatasetUtils
------------
NumPy helpers shared by the normalizer, fitter and scorer. Utilities here
centralize:

  • Coercion of caller input (mapping or (label, vectors) pairs) into an
    ordered dict of float tuples
  • Per-label and total vector counts
  • Dimension checks across every vector of every label
  • Stacking all vectors into one (n, D) matrix and splitting it back

All helpers are side-effect free and return new containers; label order and
per-label vector order are preserved.
"""

DataSetLike = Union[Mapping[Label, Iterable[Iterable[float]]], Iterable[Tuple[Label, Iterable[Iterable[float]]]]]


class DatasetUtils:
	@staticmethod
	def to_feature(vector: Iterable[float]) -> Feature:
		"""
		Coerce a flat vector-like into a tuple of Python floats.
		Scalars and nested sequences raise DimensionMismatchError (rank 1 expected).
		"""
		a = np.asarray(vector, dtype=np.float64)
		if a.ndim != 1:
			raise DimensionMismatchError(1, a.ndim, "feature vector rank")
		return tuple(float(v) for v in a)

	@staticmethod
	def coerce(data_set: DataSetLike | None) -> DataSet:
		"""
		Return an ordered dict Label -> tuple of Features built from `data_set`.
		"""
		if data_set is None:
			return {}
		if isinstance(data_set, Mapping):
			pairs: Iterable[Tuple[Any, Any]] = data_set.items()
		else:
			pairs = data_set
		out: DataSet = {}
		for lb, vectors in pairs:
			out[lb] = tuple(DatasetUtils.to_feature(v) for v in vectors)
		return out

	@staticmethod
	def counts(data_set: DataSet) -> dict:
		"""
		Number of vectors per label, in label order.
		"""
		return {lb: len(vs) for lb, vs in data_set.items()}

	@staticmethod
	def total(data_set: DataSet) -> int:
		return int(sum(len(vs) for vs in data_set.values()))

	@staticmethod
	def dimension(data_set: DataSet) -> int | None:
		"""
		Shared dimensionality of every vector; None when the dataset holds no vectors.
		Raises DimensionMismatchError on the first vector that disagrees.
		"""
		dim: int | None = None
		for vs in data_set.values():
			for v in vs:
				if dim is None:
					dim = len(v)
				elif len(v) != dim:
					raise DimensionMismatchError(dim, len(v), "training data")
		return dim

	@staticmethod
	def stack(data_set: DataSet) -> tuple[np.ndarray, List[Label], List[int]]:
		"""
		Stack every vector of every label into an (n, D) float64 matrix.

		Returns (X, labels, sizes) where rows are grouped by label in dataset
		order and sizes[i] is the row count of labels[i].
		"""
		dim = DatasetUtils.dimension(data_set)
		labels = list(data_set.keys())
		sizes = [len(data_set[lb]) for lb in labels]
		if dim is None:
			return np.zeros((0, 0), dtype=np.float64), labels, sizes
		rows: List[Feature] = []
		for lb in labels:
			rows.extend(data_set[lb])
		X = np.asarray(rows, dtype=np.float64).reshape(len(rows), dim)
		return X, labels, sizes

	@staticmethod
	def unstack(X: np.ndarray, labels: List[Label], sizes: List[int]) -> DataSet:
		"""
		Inverse of stack(): slice a row-grouped matrix back into a DataSet.
		"""
		out: DataSet = {}
		p0 = 0
		for lb, n in zip(labels, sizes):
			p1 = p0 + int(n)
			out[lb] = tuple(tuple(float(v) for v in row) for row in X[p0:p1])
			p0 = p1
		return out

	@staticmethod
	def put(data_set: DataSet, label: Label, vector: Iterable[float]) -> DataSet:
		"""
		Return a new DataSet with `vector` prepended to `label`'s vectors.

		The touched label moves to the front of the key order; other labels keep
		their relative order.
		"""
		feature = DatasetUtils.to_feature(vector)
		existing = data_set.get(label, ())
		out: DataSet = {label: (feature,) + tuple(existing)}
		for lb, vs in data_set.items():
			if lb != label:
				out[lb] = vs
		return out
