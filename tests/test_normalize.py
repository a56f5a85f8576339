"""
Tests for dataset-wide normalization.
"""

import numpy as np
import pytest

from gaussian_nb.errors import DimensionMismatchError, UnknownNormalizationStrategyError
from gaussian_nb.normalize import DatasetNormalizer, MinMaxScaler, NormalizationStrategy, ZScoreScaler

DATA = {"a1": ((1.0, 2.0), (2.0, 3.0)), "b1": ((-1.0, -2.0),)}


def _column_values(ds):
	rows = [v for vs in ds.values() for v in vs]
	return np.asarray(rows, dtype=float)


class TestStrategy:
	def test_parse_names(self):
		assert NormalizationStrategy.parse("none") is NormalizationStrategy.NONE
		assert NormalizationStrategy.parse("minimax") is NormalizationStrategy.MINIMAX
		assert NormalizationStrategy.parse("z_normalization") is NormalizationStrategy.Z_NORMALIZATION
		assert NormalizationStrategy.parse(NormalizationStrategy.MINIMAX) is NormalizationStrategy.MINIMAX

	def test_unknown_strategy(self):
		with pytest.raises(UnknownNormalizationStrategyError) as ei:
			DatasetNormalizer.normalize(DATA, "robust")
		assert ei.value.strategy == "robust"


class TestNone:
	def test_identity(self):
		assert DatasetNormalizer.normalize(DATA, "none") == DATA

	def test_default_is_none(self):
		assert DatasetNormalizer.normalize(DATA) == DATA


class TestMinimax:
	def test_reference_scenario(self):
		out = DatasetNormalizer.normalize(DATA, "minimax")
		assert list(out.keys()) == ["a1", "b1"]
		np.testing.assert_allclose(out["a1"], [[2.0 / 3.0, 0.8], [1.0, 1.0]])
		assert out["b1"] == ((0.0, 0.0),)

	def test_bounds_exact(self):
		rng = np.random.default_rng(0)
		ds = {
			"x": tuple(tuple(r) for r in rng.normal(5.0, 3.0, size=(20, 3))),
			"y": tuple(tuple(r) for r in rng.uniform(-10.0, 10.0, size=(15, 3))),
		}
		Y = _column_values(DatasetNormalizer.normalize(ds, "minimax"))
		assert np.all(Y >= 0.0) and np.all(Y <= 1.0)
		for j in range(3):
			assert Y[:, j].min() == 0.0
			assert Y[:, j].max() == 1.0

	def test_constant_column_maps_to_zero(self):
		ds = {"a": ((3.0, 1.0), (3.0, 2.0))}
		out = DatasetNormalizer.normalize(ds, "minimax")
		assert out["a"] == ((0.0, 0.0), (0.0, 1.0))

	def test_scaler_directly(self):
		Y = MinMaxScaler().fit_transform(np.array([[0.0], [5.0], [10.0]]))
		np.testing.assert_allclose(Y.ravel(), [0.0, 0.5, 1.0])


class TestZNormalization:
	def test_zero_mean_unit_std(self):
		rng = np.random.default_rng(1)
		ds = {
			"x": tuple(tuple(r) for r in rng.normal(2.0, 4.0, size=(30, 2))),
			"y": tuple(tuple(r) for r in rng.normal(-1.0, 0.5, size=(10, 2))),
		}
		Y = _column_values(DatasetNormalizer.normalize(ds, "z_normalization"))
		np.testing.assert_allclose(Y.mean(axis=0), [0.0, 0.0], atol=1e-12)
		np.testing.assert_allclose(Y.std(axis=0), [1.0, 1.0], atol=1e-12)

	def test_constant_column_of_inexact_values_maps_to_zero(self):
		"""0.1 is not exactly representable; the column is still constant."""
		ds = {"a": ((0.1, 1.0), (0.1, 2.0)), "b": ((0.1, 3.0),)}
		out = DatasetNormalizer.normalize(ds, "z_normalization")
		Y = _column_values(out)
		assert list(Y[:, 0]) == [0.0, 0.0, 0.0]
		np.testing.assert_allclose(Y[:, 1].mean(), 0.0, atol=1e-12)
		np.testing.assert_allclose(Y[:, 1].std(), 1.0)

	def test_zero_std_column_maps_to_zero(self):
		ds = {"a": ((7.0, 1.0),), "b": ((7.0, 3.0),)}
		out = DatasetNormalizer.normalize(ds, "z_normalization")
		assert out["a"] == ((0.0, -1.0),)
		assert out["b"] == ((0.0, 1.0),)

	def test_scaler_directly(self):
		sc = ZScoreScaler().fit(np.array([[1.0], [3.0]]))
		np.testing.assert_allclose(sc.mean_, [2.0])
		np.testing.assert_allclose(sc.scale_, [1.0])


class TestShape:
	def test_preserves_order_and_counts(self):
		ds = {"b": ((1.0,), (2.0,), (3.0,)), "a": ((4.0,),), "c": ()}
		out = DatasetNormalizer.normalize(ds, "minimax")
		assert list(out.keys()) == ["b", "a", "c"]
		assert [len(v) for v in out.values()] == [3, 1, 0]
		assert out["b"] == ((0.0,), (1.0 / 3.0,), (2.0 / 3.0,))

	def test_empty_dataset(self):
		assert DatasetNormalizer.normalize({}, "z_normalization") == {}

	def test_mixed_dimensions_raise(self):
		with pytest.raises(DimensionMismatchError):
			DatasetNormalizer.normalize({"a": ((1.0, 2.0), (1.0,))}, "minimax")

	def test_input_untouched(self):
		ds = {"a1": ((1.0, 2.0), (2.0, 3.0)), "b1": ((-1.0, -2.0),)}
		DatasetNormalizer.normalize(ds, "minimax")
		assert ds == DATA
