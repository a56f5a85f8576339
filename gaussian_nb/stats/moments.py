from __future__ import annotations
from typing import Iterable
import numpy as np

from gaussian_nb.errors import EmptyInputError
from gaussian_nb.types import DimensionStats


class Moments:
	"""
	Population moments of a 1-D numeric sequence.

	• mean(xs)                : arithmetic mean
	• variance(xs)            : mean squared deviation (divides by N, not N-1)
	• standard_deviation(xs)  : sqrt(variance)
	• describe(xs)            : all three as DimensionStats

	Empty input raises EmptyInputError; a single value has variance 0.0.
	"""

	@staticmethod
	def _as_array(xs: Iterable[float]) -> np.ndarray:
		a = np.asarray(list(xs), dtype=np.float64).reshape(-1)
		if a.size == 0:
			raise EmptyInputError("cannot compute moments of an empty sequence")
		return a

	@staticmethod
	def mean(xs: Iterable[float]) -> float:
		return Moments.describe(xs).mean

	@staticmethod
	def variance(xs: Iterable[float]) -> float:
		return Moments.describe(xs).variance

	@staticmethod
	def standard_deviation(xs: Iterable[float]) -> float:
		return Moments.describe(xs).standard_deviation

	@staticmethod
	def describe(xs: Iterable[float]) -> DimensionStats:
		"""
		Return mean, standard deviation and variance of `xs`.

		A sequence of identical values is reported exactly: mean equal to that
		value, variance and standard deviation 0.0.
		"""
		a = Moments._as_array(xs)
		if np.all(a == a[0]):
			return DimensionStats(mean=float(a[0]), standard_deviation=0.0, variance=0.0)
		mu = float(np.mean(a))
		var = float(np.var(a, ddof=0))
		return DimensionStats(mean=mu, standard_deviation=float(np.sqrt(var)), variance=var)
