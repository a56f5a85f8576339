"""
Tests for Gaussian density and naive posterior scoring.
"""

import math

import pytest
from scipy.stats import norm

from gaussian_nb.classify import ClassifyEngine
from gaussian_nb.errors import DimensionMismatchError, NotFittedError
from gaussian_nb.fitting import GaussianFitter
from gaussian_nb.types import DimensionStats, FitResult


class TestGaussianPdf:
	def test_matches_formula(self):
		x, mu, sd = 1.3, 0.4, 2.0
		expected = (1.0 / (sd * math.sqrt(2.0 * math.pi))) * math.exp(-((x - mu) ** 2) / (2.0 * sd ** 2))
		assert ClassifyEngine.gaussian_pdf(x, mu, sd) == pytest.approx(expected)

	def test_zero_std_point_mass(self):
		assert ClassifyEngine.gaussian_pdf(2.0, 2.0, 0.0) == 1.0
		assert ClassifyEngine.gaussian_pdf(2.1, 2.0, 0.0) == 0.0


class TestClassify:
	FIT = GaussianFitter.fit({
		"a1": ((1.0, 2.0), (2.0, 3.0), (1.5, 1.0)),
		"a2": ((4.0, 6.0), (5.0, 4.0)),
	})

	def test_scores_are_prior_times_product(self):
		pred = ClassifyEngine.classify(self.FIT, [1.0, 2.0])
		assert list(pred) == ["a1", "a2"]
		for lb, stats in self.FIT.items():
			dens = [norm.pdf(x, s.mean, s.standard_deviation) for x, s in zip([1.0, 2.0], stats)]
			assert pred[lb] == pytest.approx(self.FIT.prior(lb) * dens[0] * dens[1])

	def test_scores_non_negative(self):
		pred = ClassifyEngine.classify(self.FIT, [1, 2])
		assert set(pred) == {"a1", "a2"}
		assert all(v >= 0.0 for v in pred.values())
		assert pred["a1"] > pred["a2"]

	def test_predict_is_max(self):
		for q in ([1.0, 2.0], [4.5, 5.0], [3.0, 3.0]):
			pred = ClassifyEngine.classify(self.FIT, q)
			lb, sc = ClassifyEngine.predict(self.FIT, q)
			assert lb in pred
			assert sc == max(pred.values())

	def test_tie_goes_to_later_label(self):
		fit = GaussianFitter.fit({"x": ((0.0,),), "y": ((0.0,),)})
		assert ClassifyEngine.predict(fit, [0.0]) == ("y", 0.5)
		fit = GaussianFitter.fit({"y": ((0.0,),), "x": ((0.0,),)})
		assert ClassifyEngine.predict(fit, [0.0]) == ("x", 0.5)

	def test_empty_stats_score_zero(self):
		fit = FitResult(
			features={"a": (DimensionStats(0.0, 1.0, 1.0),), "b": ()},
			counts={"a": 1, "b": 0},
		)
		pred = ClassifyEngine.classify(fit, [0.0])
		assert pred["b"] == 0.0
		assert ClassifyEngine.predict(fit, [0.0])[0] == "a"

	def test_dimension_mismatch(self):
		with pytest.raises(DimensionMismatchError) as ei:
			ClassifyEngine.classify(self.FIT, [1.0, 2.0, 3.0])
		assert ei.value.expected == 2
		assert ei.value.actual == 3

	def test_not_fitted(self):
		with pytest.raises(NotFittedError):
			ClassifyEngine.classify(FitResult.empty(), [1.0])
