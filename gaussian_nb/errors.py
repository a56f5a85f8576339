"""
Typed failures raised by the classifier pipeline.

All errors derive from GaussianNBError (a ValueError), so callers may catch
the whole family or a single kind.
"""

from __future__ import annotations


class GaussianNBError(ValueError):
	"""Base class for classifier errors."""


class EmptyInputError(GaussianNBError):
	"""Statistics, fitting or scoring requested on no data."""


class NotFittedError(GaussianNBError):
	"""Classification or scoring requested before fit()."""


class UnknownNormalizationStrategyError(GaussianNBError):
	def __init__(self, strategy: object) -> None:
		self.strategy = strategy
		super().__init__(f"Unknown normalization strategy: {strategy!r}")


class DimensionMismatchError(GaussianNBError):
	def __init__(self, expected: int, actual: int, context: str = "feature vector") -> None:
		self.expected = int(expected)
		self.actual = int(actual)
		super().__init__(f"Dimension mismatch in {context}: expected {self.expected}, got {self.actual}")
