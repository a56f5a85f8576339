from .base import DatasetUtils
from .builders import DatasetBuilder

counts = DatasetUtils.counts
total = DatasetUtils.total
dimension = DatasetUtils.dimension

__all__ = ["DatasetUtils", "DatasetBuilder", "counts", "total", "dimension"]
