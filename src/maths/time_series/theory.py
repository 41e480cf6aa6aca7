"""
Theoretical moments of the example processes, all driven by white noise with variance sigma2.

Moving average of an odd window w = 2k + 1:
    gamma(h) = sigma2 * (w - |h|) / w^2 for |h| < w, 0 otherwise
    (3/9, 2/9 and 0 for the 3-point average at h = 0, 1, 2)

y_t = a + w_t - c * w_{t-1}:
    gamma(0) = sigma2 * (1 + c^2), gamma(+/-1) = -c * sigma2, 0 otherwise

Random walk with drift x_t = delta * t + sum_{j=1}^t w_j:
    E[x_t] = delta * t, Var[x_t] = sigma2 * t
"""

from data_types.errors import InvalidArgument
from data_types.vectors import as_int
from globals import AR_COEFFICIENT, MA_WINDOW


def _check_sigma2(sigma2: float) -> None:
    if not sigma2 > 0:
        raise InvalidArgument(f"sigma2 must be positive, got {sigma2}.")


def _check_window(window: int) -> int:
    size = as_int(window, "window")
    if size < 1 or size % 2 == 0:
        raise InvalidArgument(f"window must be a positive odd integer, got {size}.")
    return size


def _check_time(t: int) -> int:
    t = as_int(t, "t")
    if t < 1:
        raise InvalidArgument(f"Time index starts at 1, got {t}.")
    return t


def moving_average_avf(h: int, window: int = MA_WINDOW, sigma2: float = 1.0) -> float:
    size = _check_window(window)
    _check_sigma2(sigma2)
    overlap = size - abs(as_int(h, "Lag"))
    if overlap <= 0:
        return 0.0
    return sigma2 * overlap / size**2


def moving_average_acf(h: int, window: int = MA_WINDOW) -> float:
    size = _check_window(window)
    return max(size - abs(as_int(h, "Lag")), 0) / size


def autoregressive_avf(
    h: int, coefficient: float = AR_COEFFICIENT, sigma2: float = 1.0
) -> float:
    _check_sigma2(sigma2)
    h = abs(as_int(h, "Lag"))
    if h == 0:
        return sigma2 * (1 + coefficient**2)
    if h == 1:
        return -coefficient * sigma2
    return 0.0


def autoregressive_acf(h: int, coefficient: float = AR_COEFFICIENT) -> float:
    return autoregressive_avf(h, coefficient) / autoregressive_avf(0, coefficient)


def random_walk_mean(t: int, drift: float = 0.0) -> float:
    return drift * _check_time(t)


def random_walk_variance(t: int, sigma2: float = 1.0) -> float:
    _check_sigma2(sigma2)
    return sigma2 * _check_time(t)
