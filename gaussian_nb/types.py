"""
Shared value types for the Gaussian NB pipeline.

	Label         : any hashable class identifier
	Feature       : tuple of floats (one observation)
	DataSet       : ordered mapping Label -> tuple of Features (most recent first)
	DimensionStats: per-label, per-dimension Gaussian parameters
	FitResult     : ordered per-label DimensionStats plus training counts
	Prediction    : ordered dict Label -> unnormalized posterior score
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Hashable, Iterator, Mapping, Tuple

Label = Hashable
Feature = Tuple[float, ...]
DataSet = Mapping[Label, Tuple[Feature, ...]]
Prediction = Dict[Label, float]


@dataclass(frozen=True)
class DimensionStats:
	"""Gaussian parameters of one feature dimension of one label."""
	mean: float
	standard_deviation: float
	variance: float

	def as_dict(self) -> Dict[str, float]:
		return {
			"mean": self.mean,
			"standard_deviation": self.standard_deviation,
			"variance": self.variance,
		}


@dataclass(frozen=True)
class FitResult:
	"""
	Fitted parameters of a classifier.

	`features[label]` holds one DimensionStats per dimension, in input order.
	`counts[label]` is the number of training vectors behind it; priors are
	derived from these counts. Iteration follows the fitted label order.
	Both mappings are read-only views over private copies.
	"""
	features: Mapping[Label, Tuple[DimensionStats, ...]] = field(default_factory=dict)
	counts: Mapping[Label, int] = field(default_factory=dict)

	def __post_init__(self) -> None:
		object.__setattr__(self, "features", MappingProxyType({lb: tuple(s) for lb, s in self.features.items()}))
		object.__setattr__(self, "counts", MappingProxyType({lb: int(n) for lb, n in self.counts.items()}))

	def __hash__(self) -> int:
		return hash((tuple(self.features.items()), tuple(self.counts.items())))

	@staticmethod
	def empty() -> "FitResult":
		return FitResult()

	@property
	def is_empty(self) -> bool:
		return len(self.features) == 0

	@property
	def total(self) -> int:
		return int(sum(self.counts.values()))

	def prior(self, label: Label) -> float:
		"""Fraction of training vectors labeled `label`."""
		tot = self.total
		if tot == 0:
			return 0.0
		return float(self.counts.get(label, 0)) / float(tot)

	def __getitem__(self, label: Label) -> Tuple[DimensionStats, ...]:
		return self.features[label]

	def __iter__(self) -> Iterator[Label]:
		return iter(self.features)

	def __len__(self) -> int:
		return len(self.features)

	def items(self):
		return self.features.items()

	def as_dict(self) -> Dict[Label, list]:
		"""Plain mapping form: label -> list of {mean, standard_deviation, variance}."""
		out: Dict[Label, list] = {}
		for lb, stats in self.features.items():
			out[lb] = [s.as_dict() for s in stats]
		return out
