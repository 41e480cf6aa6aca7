import operator
from typing import Annotated, Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import AfterValidator, BeforeValidator

from data_types.errors import InvalidArgument


def as_series(data: ArrayLike) -> NDArray[np.float64]:
    """
    Coerces any 1D sequence of reals into a float64 array, rejecting empty and non-finite input.
    """
    try:
        a = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Series must be a sequence of real numbers: {exc}")

    if a.ndim != 1:
        raise InvalidArgument(f"Series must be 1D, got {a.ndim} dimensions.")
    if a.size == 0:
        raise InvalidArgument("Series must contain at least one observation.")
    if not np.all(np.isfinite(a)):
        raise InvalidArgument("Series must not contain NaN or infinite values.")
    return a


def as_int(value: Any, name: str) -> int:
    # bools are ints to python, but a lag of True is a bug
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")


def as_finite(value: Any, name: str) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}.")
    if not np.isfinite(x):
        raise InvalidArgument(f"{name} must be finite, got {value!r}.")
    return x


def check_lag(h: Any, n_obs: int) -> int:
    """
    Validates a lag against a series of length n_obs, ie. 0 <= h < n_obs.
    """
    lag = as_int(h, "Lag")
    if lag < 0 or lag >= n_obs:
        raise InvalidArgument(
            f"Lag must satisfy 0 <= h < n, got h={lag} for n={n_obs}."
        )
    return lag


def _to_array(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return np.asarray(value, dtype=np.float64)
    return value


def _as_series_vector(a: NDArray[np.float64]) -> NDArray[np.float64]:
    a = as_series(a).copy()
    a.flags.writeable = False
    return a


SeriesVector = Annotated[
    NDArray[np.float64],
    BeforeValidator(_to_array),
    AfterValidator(_as_series_vector),
]
