from __future__ import annotations
from enum import Enum
from typing import Union

from gaussian_nb.errors import UnknownNormalizationStrategyError


class NormalizationStrategy(str, Enum):
	NONE = "none"
	MINIMAX = "minimax"
	Z_NORMALIZATION = "z_normalization"

	@staticmethod
	def parse(value: Union[str, "NormalizationStrategy"]) -> "NormalizationStrategy":
		"""Resolve a strategy name (or member) to a member; unknown names raise."""
		if isinstance(value, NormalizationStrategy):
			return value
		if isinstance(value, str):
			for s in NormalizationStrategy:
				if s.value == value:
					return s
		raise UnknownNormalizationStrategyError(value)
