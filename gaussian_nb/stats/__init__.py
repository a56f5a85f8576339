"""
Population statistics

Public API:
  Moments, mean, variance, standard_deviation, describe
"""

from .moments import Moments

mean = Moments.mean
variance = Moments.variance
standard_deviation = Moments.standard_deviation
describe = Moments.describe

__all__ = ["Moments", "mean", "variance", "standard_deviation", "describe"]
