from .classifier import (
	GaussianNB,
	new,
	add_train_data,
	normalize_train_data,
	fit,
	predict_proba,
	predict,
	score,
)

__all__ = [
	"GaussianNB", "new", "add_train_data", "normalize_train_data",
	"fit", "predict_proba", "predict", "score",
]
