"""
GaussianNB: immutable Gaussian Naive Bayes classifier.

Pipeline:
	new(data_set) → add_train_data(...) → normalize_train_data(...) → fit()
	→ predict_proba(x) / predict(x) / score()

Every step returns a fresh GaussianNB; no instance is ever modified. Changing
the dataset (add or normalize) drops the fit, so data_set and fit_data never
disagree.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Optional, Tuple, Union

from gaussian_nb.classify import ClassifyEngine
from gaussian_nb.config import ClassifierConfig
from gaussian_nb.dataset.base import DataSetLike, DatasetUtils as U
from gaussian_nb.errors import NotFittedError
from gaussian_nb.fitting import GaussianFitter
from gaussian_nb.normalize import DatasetNormalizer, NormalizationStrategy
from gaussian_nb.scoring import AccuracyScorer
from gaussian_nb.types import DataSet, FitResult, Label, Prediction



@dataclass(frozen=True)
class GaussianNB:
	"""
	Immutable snapshot of training data and (optionally) its fitted parameters.

	Fields
	------
	data_set : read-only ordered mapping Label -> tuple of float tuples (most recent first)
	config   : ClassifierConfig carried through every update
	fit_data : FitResult; empty until fit(), and only ever set by fit()
	"""
	data_set: DataSet = field(default_factory=dict)
	config: ClassifierConfig = field(default_factory=ClassifierConfig)
	fit_data: FitResult = field(default_factory=FitResult.empty, init=False)

	def __post_init__(self) -> None:
		object.__setattr__(self, "data_set", MappingProxyType(U.coerce(self.data_set)))

	def __hash__(self) -> int:
		return hash((tuple(self.data_set.items()), self.config, self.fit_data))

	@staticmethod
	def new(data_set: Optional[DataSetLike] = None, config: Optional[ClassifierConfig] = None) -> "GaussianNB":
		"""
		Create a classifier, empty or from a mapping / (label, vectors) pairs.
		"""
		cfg = config if config is not None else ClassifierConfig()
		return GaussianNB(data_set=U.coerce(data_set), config=cfg)

	@property
	def labels(self) -> List[Label]:
		return list(self.data_set.keys())

	@property
	def n_features(self) -> Optional[int]:
		return U.dimension(self.data_set)

	@property
	def is_fitted(self) -> bool:
		return not self.fit_data.is_empty

	def add_train_data(self, label: Label, vector: Iterable[float]) -> "GaussianNB":
		"""Prepend `vector` to `label`'s training data; the fit is dropped."""
		return GaussianNB(data_set=U.put(self.data_set, label, vector), config=self.config)

	def normalize_train_data(self, strategy: Union[str, NormalizationStrategy, None] = None) -> "GaussianNB":
		"""
		Rescale the training data with none / minimax / z_normalization.
		Defaults to config.default_strategy. The fit is dropped.
		"""
		s = strategy if strategy is not None else self.config.default_strategy
		return GaussianNB(data_set=DatasetNormalizer.normalize(self.data_set, s), config=self.config)

	def fit(self) -> "GaussianNB":
		out = GaussianNB(data_set=self.data_set, config=self.config)
		object.__setattr__(out, "fit_data", GaussianFitter.fit(out.data_set))
		return out

	def predict_proba(self, feature: Iterable[float]) -> Prediction:
		"""Unnormalized posterior score for every fitted label."""
		return ClassifyEngine.classify(self.fit_data, feature)

	def predict(self, feature: Iterable[float]) -> Tuple[Label, float]:
		"""Best (label, score) for `feature`."""
		return ClassifyEngine.predict(self.fit_data, feature)

	def score(self) -> float:
		"""Accuracy of the fitted model on its own training data."""
		if U.total(self.data_set) > 0 and not self.is_fitted:
			raise NotFittedError("classifier has not been fitted")
		return AccuracyScorer.score(self.fit_data, self.data_set, self.config.score_digits)


def new(data_set: Optional[DataSetLike] = None, config: Optional[ClassifierConfig] = None) -> GaussianNB:
	return GaussianNB.new(data_set, config)


def add_train_data(classifier: GaussianNB, label: Label, vector: Iterable[float]) -> GaussianNB:
	return classifier.add_train_data(label, vector)


def normalize_train_data(classifier: GaussianNB, strategy: Union[str, NormalizationStrategy, None] = None) -> GaussianNB:
	return classifier.normalize_train_data(strategy)


def fit(classifier: GaussianNB) -> GaussianNB:
	return classifier.fit()


def predict_proba(classifier: GaussianNB, feature: Iterable[float]) -> Prediction:
	return classifier.predict_proba(feature)


def predict(classifier: GaussianNB, feature: Iterable[float]) -> Tuple[Label, float]:
	return classifier.predict(feature)


def score(classifier: GaussianNB) -> float:
	return classifier.score()
