import numpy as np
import polars as pl
from numpy.typing import ArrayLike

from data_types.errors import DivisionByZero
from data_types.vectors import as_series
from globals import LAGS, SIGN_LVL
from maths.time_series.estimation import (
    acf_confidence_band,
    acf_range,
    avf_range,
    lagged_pearson,
)
from maths.time_series.generators import (
    autoregressive,
    moving_average,
    random_walk,
    white_noise,
)
from models.time_series import ProcessSpec, TimeSeries, time_index
from utils.helpers import build_lag_df, select_columns
from utils.log import get_logger

logger = get_logger(__name__)


def simulate_processes(spec: ProcessSpec | None = None) -> dict[str, TimeSeries]:
    """
    Builds every intro process from one white noise draw, each on its own slice of the time index.

    - moving_average: timestamps of the window centres
    - autoregressive: the first n - 1 timestamps ("next" offset) or the last n - 1 ("previous")
    - random_walk / random_walk_drift: the full index
    """
    if spec is None:
        spec = ProcessSpec()

    index = time_index(spec.n, start=spec.start, interval=spec.interval)
    noise = white_noise(spec.n, seed=spec.seed)
    half = spec.window // 2

    ar_index = index[:-1] if spec.offset == "next" else index[1:]

    logger.debug(
        "Simulating processes n=%d seed=%d window=%d offset=%s drift=%s",
        spec.n,
        spec.seed,
        spec.window,
        spec.offset,
        spec.drift,
    )

    return {
        "white_noise": TimeSeries(
            name="white_noise", timestamps=index, values=noise
        ),
        "moving_average": TimeSeries(
            name="moving_average",
            timestamps=index[half : spec.n - half],
            values=moving_average(noise, window=spec.window),
        ),
        "autoregressive": TimeSeries(
            name="autoregressive",
            timestamps=ar_index,
            values=autoregressive(
                noise,
                intercept=spec.intercept,
                coefficient=spec.coefficient,
                offset=spec.offset,
            ),
        ),
        "random_walk": TimeSeries(
            name="random_walk", timestamps=index, values=random_walk(noise)
        ),
        "random_walk_drift": TimeSeries(
            name="random_walk_drift",
            timestamps=index,
            values=random_walk(noise, drift=spec.drift),
        ),
    }


def processes_frame(series: dict[str, TimeSeries]) -> pl.DataFrame:
    """
    Joins all series on date onto the longest index, shorter series are null at the edges.
    """
    if not series:
        raise ValueError("Need at least one series to build a frame.")

    ordered = sorted(series.values(), key=len, reverse=True)
    df = ordered[0].to_frame()
    for ts in ordered[1:]:
        df = df.join(ts.to_frame(), on="date", how="left")

    return df.select("date", *[ts.name for ts in series.values()])


def _pearson_or_none(data: np.ndarray, h: int) -> float | None:
    if data.size - h < 2:
        return None
    try:
        return lagged_pearson(data, h)
    except DivisionByZero:  # one of the lagged slices is constant
        return None


def correlogram(
    series: ArrayLike | TimeSeries,
    max_lag: int = LAGS["strict"],
    sign_lvl: float = SIGN_LVL,
) -> pl.DataFrame:
    """
    Table of avf, acf and lagged pearson correlation for lags 0..max_lag.

    outside_band flags lags >= 1 whose acf falls outside the white noise band at sign_lvl.
    """
    data = series.values if isinstance(series, TimeSeries) else as_series(series)

    gammas = avf_range(data, max_lag)
    rhos = acf_range(data, max_lag)
    pearson = [_pearson_or_none(data, h) for h in range(max_lag + 1)]
    band = acf_confidence_band(data.size, sign_lvl=sign_lvl)

    return pl.DataFrame(
        {
            "lag": np.arange(max_lag + 1),
            "avf": gammas,
            "acf": rhos,
            "pearson": pl.Series("pearson", pearson, dtype=pl.Float64),
        }
    ).with_columns(
        outside_band=pl.when(pl.col("lag") > 0)
        .then(pl.col("acf").abs() > band)
        .otherwise(False)
    )


def lagged_frames(
    data: pl.DataFrame,
    columns: list[str] | None = None,
    lags: int = LAGS["testing"],
) -> dict[str, pl.DataFrame]:
    """
    Per column, x_t next to L x_t, ..., L^lags x_t with the rows lacking a full past dropped.
    """
    return {
        column: build_lag_df(data=data, column=column, lags=lags).drop_nulls()
        for column in select_columns(data, columns)
    }


def describe_processes(
    spec: ProcessSpec | None = None, max_lag: int = LAGS["strict"]
) -> dict[str, pl.DataFrame]:
    """
    Correlogram of every simulated process.
    """
    processes = simulate_processes(spec)
    logger.debug("Computing correlograms up to lag %d", max_lag)
    return {name: correlogram(ts, max_lag=max_lag) for name, ts in processes.items()}
