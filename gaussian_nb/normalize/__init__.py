"""
Normalization: package re-exports

Public API:
  NormalizationStrategy, DatasetNormalizer, MinMaxScaler, ZScoreScaler, normalize
"""

from .strategy import NormalizationStrategy
from .minimax import MinMaxScaler
from .z_score import ZScoreScaler
from .normalizer import DatasetNormalizer

normalize = DatasetNormalizer.normalize

__all__ = ["NormalizationStrategy", "DatasetNormalizer", "MinMaxScaler", "ZScoreScaler", "normalize"]
