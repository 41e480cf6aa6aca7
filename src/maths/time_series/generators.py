from typing import Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from data_types.errors import InvalidArgument
from data_types.vectors import as_finite, as_int, as_series
from globals import AR_COEFFICIENT, AR_INTERCEPT, DEFAULT_SEED, MA_WINDOW
from utils.log import get_logger

logger = get_logger(__name__)

NoiseOffset = Literal["next", "previous"]


def white_noise(
    n: int, seed: int = DEFAULT_SEED, scale: float = 1.0
) -> NDArray[np.float64]:
    """
    Draws n iid N(0, scale^2) values.

    A new PCG64 generator (numpy default_rng) is built from the seed on every call,
    so the same (n, seed, scale) always returns the same sequence.
    """
    n_obs = as_int(n, "n")
    if n_obs < 1:
        raise InvalidArgument(f"n must be positive, got {n_obs}.")
    seed = as_int(seed, "seed")
    if seed < 0:
        raise InvalidArgument(f"seed must be non-negative, got {seed}.")
    scale = as_finite(scale, "scale")
    if scale <= 0:
        raise InvalidArgument(f"scale must be positive, got {scale}.")

    rng = np.random.default_rng(seed)
    logger.debug("Drawing %d white noise values with seed=%s", n_obs, seed)
    return rng.normal(loc=0.0, scale=scale, size=n_obs)


def moving_average(series: ArrayLike, window: int = MA_WINDOW) -> NDArray[np.float64]:
    """
    Centered moving average, v_t = (w_{t-k} + ... + w_{t+k}) / window with window = 2k + 1.

    Positions without a full window are dropped, so the output has n - (window - 1) values
    and output[i] is centred on series[i + window // 2].
    """
    data = as_series(series)
    size = as_int(window, "window")

    if size < 1 or size % 2 == 0:
        raise InvalidArgument(f"window must be a positive odd integer, got {size}.")
    if size > data.size:
        raise InvalidArgument(
            f"window ({size}) can not be larger than the series ({data.size})."
        )

    windows = np.lib.stride_tricks.sliding_window_view(data, size)
    return windows.mean(axis=1)


def autoregressive(
    series: ArrayLike,
    intercept: float = AR_INTERCEPT,
    coefficient: float = AR_COEFFICIENT,
    offset: NoiseOffset = "next",
) -> NDArray[np.float64]:
    """
    Builds y = intercept + w_t - coefficient * w_{t +/- 1} from a white noise input of length n.

    offset="next" pairs each sample with the one after it,
        y[t] = intercept + w[t] - coefficient * w[t + 1]
    which is how the intro notebooks slice their arrays. offset="previous" gives the
    textbook form y_t = a + w_t - c * w_{t-1},
        y[t] = intercept + w[t + 1] - coefficient * w[t]
    Both return n - 1 values.
    """
    data = as_series(series)
    if data.size < 2:
        raise InvalidArgument("Need at least 2 noise samples to build the series.")
    intercept = as_finite(intercept, "intercept")
    coefficient = as_finite(coefficient, "coefficient")

    if offset == "next":
        current, other = data[:-1], data[1:]
    elif offset == "previous":
        current, other = data[1:], data[:-1]
    else:
        raise InvalidArgument(
            f"offset must be one of 'next' or 'previous', got {offset!r}."
        )

    return intercept + current - coefficient * other


def random_walk(series: ArrayLike, drift: float = 0.0) -> NDArray[np.float64]:
    """
    x_t = drift * t + sum_{j <= t} w_j, drift = 0 is the plain random walk.
    """
    data = as_series(series)
    drift = as_finite(drift, "drift")
    return np.cumsum(data + drift)
