from .fitter import GaussianFitter

fit_data = GaussianFitter.fit

__all__ = ["GaussianFitter", "fit_data"]
