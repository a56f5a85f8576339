from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class ZScoreScaler:
	"""
	Column-wise z-normalization.

	• fit(X): store mean_, scale_ (population std) and constant_ (max == min)
	• transform(X): (X - mean_) / scale_, with 0.0 for constant columns

	Constancy is read from the column range, not from scale_.
	"""
	mean_: np.ndarray | None = None
	scale_: np.ndarray | None = None
	constant_: np.ndarray | None = None

	def fit(self, X: np.ndarray) -> "ZScoreScaler":
		X = np.asarray(X, dtype=np.float64)
		self.mean_ = np.mean(X, axis=0).astype(np.float64, copy=True)
		self.scale_ = np.std(X, axis=0).astype(np.float64, copy=True)
		self.constant_ = (np.ptp(X, axis=0) == 0.0) | (self.scale_ <= 0.0)
		return self

	def transform(self, X: np.ndarray) -> np.ndarray:
		assert self.mean_ is not None and self.scale_ is not None and self.constant_ is not None
		X = np.asarray(X, dtype=np.float64)
		safe = np.where(self.constant_, 1.0, self.scale_)
		out = (X - self.mean_) / safe
		return np.where(self.constant_, 0.0, out)

	def fit_transform(self, X: np.ndarray) -> np.ndarray:
		return self.fit(X).transform(X)
