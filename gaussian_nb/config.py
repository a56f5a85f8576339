"""
Classifier configuration.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClassifierConfig:
	"""
	Knobs carried by a classifier through every functional update.

	default_strategy : normalization used when normalize_train_data() gets no argument
	score_digits     : round score() to this many digits (None keeps full precision)
	"""
	default_strategy: str = "none"
	score_digits: Optional[int] = None
