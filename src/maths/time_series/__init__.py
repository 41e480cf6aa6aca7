from .base import HypTestRes, white_noise_lag_test, white_noise_lag_tests
from .estimation import (
    acf,
    acf_confidence_band,
    acf_range,
    avf,
    avf_range,
    lagged_pearson,
    sample_mean,
)
from .generators import autoregressive, moving_average, random_walk, white_noise
from .lag import LagPair, apply_lag_polynomial, lag, lag_operator

__all__ = [
    "HypTestRes",
    "white_noise_lag_test",
    "white_noise_lag_tests",
    "acf",
    "acf_confidence_band",
    "acf_range",
    "avf",
    "avf_range",
    "lagged_pearson",
    "sample_mean",
    "autoregressive",
    "moving_average",
    "random_walk",
    "white_noise",
    "LagPair",
    "apply_lag_polynomial",
    "lag",
    "lag_operator",
]
