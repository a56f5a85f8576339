from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class MinMaxScaler:
	"""
	Column-wise min-max scaler.

	Given columns x_d with lo_d = min(x_d), hi_d = max(x_d):
		N(v) = (v - lo_d) / (hi_d - lo_d)
	Constant columns (hi_d == lo_d) map to 0.0 instead of dividing by zero.
	"""
	min_: np.ndarray | None = None
	max_: np.ndarray | None = None

	def fit(self, X: np.ndarray) -> "MinMaxScaler":
		X = np.asarray(X, dtype=np.float64)
		self.min_ = np.min(X, axis=0).astype(np.float64, copy=True)
		self.max_ = np.max(X, axis=0).astype(np.float64, copy=True)
		return self

	def transform(self, X: np.ndarray) -> np.ndarray:
		assert self.min_ is not None and self.max_ is not None
		X = np.asarray(X, dtype=np.float64)
		span = self.max_ - self.min_
		safe = np.where(span > 0.0, span, 1.0)
		out = (X - self.min_) / safe
		return np.where(span > 0.0, out, 0.0)

	def fit_transform(self, X: np.ndarray) -> np.ndarray:
		return self.fit(X).transform(X)
