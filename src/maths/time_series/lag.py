from typing import NamedTuple, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from data_types.errors import InvalidArgument
from data_types.vectors import as_series, check_lag


class LagPair(NamedTuple):
    past: NDArray[np.float64]
    present: NDArray[np.float64]


def _read_only(a: NDArray[np.float64]) -> NDArray[np.float64]:
    view = a.view()
    view.flags.writeable = False
    return view


def lag(series: ArrayLike, h: int) -> LagPair:
    """
    Aligns x_{t-h} (past) with x_t (present).

    Returns read-only views past = x[0 : n-h] and present = x[h : n], so present[i] is h steps
    ahead of past[i].
    """
    data = as_series(series)
    h = check_lag(h, data.size)
    n_obs = data.size

    return LagPair(
        past=_read_only(data[: n_obs - h]),
        present=_read_only(data[h:]),
    )


def lag_operator(series: ArrayLike, power: int = 1) -> NDArray[np.float64]:
    """
    Applies L^k to the series, ie. out[t] = x[t - k]. The first k values have no past and are NaN.
    """
    data = as_series(series)
    k = check_lag(power, data.size)

    out = np.full(data.size, np.nan)
    out[k:] = data[: data.size - k]
    return out


def apply_lag_polynomial(
    series: ArrayLike, coefficients: Sequence[float]
) -> NDArray[np.float64]:
    """
    Evaluates a(L) x_t = a_0 x_t + a_1 x_{t-1} + ... + a_p x_{t-p} for t = p, ..., n - 1.
    """
    data = as_series(series)
    coefs = np.asarray(coefficients, dtype=np.float64)

    if coefs.ndim != 1 or coefs.size == 0:
        raise InvalidArgument("Lag polynomial needs at least one coefficient.")
    if not np.all(np.isfinite(coefs)):
        raise InvalidArgument("Lag polynomial coefficients must be finite.")

    order = coefs.size - 1
    if order >= data.size:
        raise InvalidArgument(
            f"Lag polynomial of order {order} needs more than {data.size} observations."
        )

    n_out = data.size - order
    res = np.zeros(n_out)
    for k, a_k in enumerate(coefs):
        res += a_k * data[order - k : order - k + n_out]
    return res
