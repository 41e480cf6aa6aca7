"""
Sample estimators of the mean, autocovariance (AVF) and autocorrelation (ACF) functions.

All estimators use the biased convention

    gamma_hat(h) = 1/n * sum_{t=0}^{n-h-1} (x_{t+h} - x_bar)(x_t - x_bar)

ie. every lag is divided by the full length n, never by n - h. The ACF is the ratio
gamma_hat(h) / gamma_hat(0), so the n cancels.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import norm

from data_types.errors import DivisionByZero, InvalidArgument
from data_types.vectors import as_series, check_lag
from globals import SIGN_LVL
from maths.time_series.lag import lag


def _deviations(data: NDArray[np.float64]) -> NDArray[np.float64]:
    return data - data.mean(dtype=np.float64)


def _check_not_constant(data: NDArray[np.float64], what: str = "series") -> None:
    # the float mean of a constant like 0.1 is inexact, so test the values, not gamma_0
    if np.ptp(data) == 0:
        raise DivisionByZero(f"Correlation is undefined for a constant {what}.")


def _lagged_sum(dev: NDArray[np.float64], h: int) -> float:
    n_obs = dev.size
    return float(np.dot(dev[h:], dev[: n_obs - h]))


def sample_mean(series: ArrayLike) -> float:
    return float(as_series(series).mean(dtype=np.float64))


def avf(series: ArrayLike, h: int) -> float:
    """
    Sample autocovariance at lag h (divide by n).

    >>> avf([1.0, 2.0, 3.0, 4.0, 5.0], 1)
    0.8
    """
    data = as_series(series)
    h = check_lag(h, data.size)
    return _lagged_sum(_deviations(data), h) / data.size


def acf(series: ArrayLike, h: int) -> float:
    """
    Sample autocorrelation at lag h, avf(h) / avf(0).

    Not clamped to [-1, 1]. Raises DivisionByZero for a constant series.
    """
    data = as_series(series)
    h = check_lag(h, data.size)
    _check_not_constant(data)
    dev = _deviations(data)

    gamma_0 = _lagged_sum(dev, 0) / data.size

    return (_lagged_sum(dev, h) / data.size) / gamma_0


def avf_range(series: ArrayLike, max_lag: int) -> NDArray[np.float64]:
    """
    Sample autocovariances for lags 0, 1, ..., max_lag.
    """
    data = as_series(series)
    max_lag = check_lag(max_lag, data.size)
    dev = _deviations(data)

    return np.array([_lagged_sum(dev, h) for h in range(max_lag + 1)]) / data.size


def acf_range(series: ArrayLike, max_lag: int) -> NDArray[np.float64]:
    """
    Correlogram, ie. sample autocorrelations for lags 0, 1, ..., max_lag.
    """
    data = as_series(series)
    gammas = avf_range(data, max_lag)
    _check_not_constant(data)
    return gammas / gammas[0]


def lagged_pearson(series: ArrayLike, h: int) -> float:
    """
    Pearson correlation between x_t and x_{t-h}, each half centred on its own mean.

    This is what a plain correlation of the two lagged slices gives, and it converges to the
    ACF for long series.
    """
    data = as_series(series)
    h = check_lag(h, data.size)
    if data.size - h < 2:
        raise InvalidArgument(
            f"Pearson correlation needs 2 overlapping points, got {data.size - h}."
        )

    past, present = lag(data, h)
    _check_not_constant(past, "lagged slice")
    _check_not_constant(present, "lagged slice")
    past_dev = _deviations(past)
    present_dev = _deviations(present)

    denominator = np.sqrt(np.dot(past_dev, past_dev) * np.dot(present_dev, present_dev))

    return float(np.dot(present_dev, past_dev) / denominator)


def acf_confidence_band(n_obs: int, sign_lvl: float = SIGN_LVL) -> float:
    """
    Half-width of the large sample band z_{1 - sign_lvl / 2} / sqrt(n) for the ACF of white noise.
    """
    if n_obs < 1:
        raise InvalidArgument(f"Number of observations must be positive, got {n_obs}.")
    if not 0 < sign_lvl < 1:
        raise InvalidArgument(f"Significance level must be in (0, 1), got {sign_lvl}.")

    return float(norm.ppf(1 - sign_lvl / 2) / np.sqrt(n_obs))
