import datetime
from typing import Self

import numpy as np
import polars as pl
from numpy.typing import ArrayLike
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    field_validator,
    model_validator,
    validate_call,
)

from data_types.vectors import SeriesVector
from globals import (
    AR_COEFFICIENT,
    AR_INTERCEPT,
    DEFAULT_SEED,
    DRIFT,
    MA_WINDOW,
    SERIES_INTERVAL,
    SERIES_START,
    model_cfg,
)
from maths.time_series.generators import NoiseOffset


@validate_call(config=model_cfg)
def time_index(
    n_obs: PositiveInt,
    start: datetime.datetime = SERIES_START,
    interval: datetime.timedelta = SERIES_INTERVAL,
) -> list[datetime.datetime]:
    """
    Evenly spaced timestamps start, start + interval, ..., n_obs of them.
    """
    return pl.datetime_range(
        start=start,
        end=start + (n_obs - 1) * interval,
        interval=interval,
        eager=True,
    ).to_list()


class TimeSeries(BaseModel):
    """
    Immutable, regularly spaced series of (timestamp, value) pairs.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)
    name: str = "value"
    timestamps: list[datetime.datetime]
    values: SeriesVector

    @model_validator(mode="after")
    def check_index(self) -> Self:
        if len(self.timestamps) != self.values.size:
            raise ValueError(
                f"Got {len(self.timestamps)} timestamps for {self.values.size} values."
            )
        if any(a >= b for a, b in zip(self.timestamps, self.timestamps[1:])):
            raise ValueError("Timestamps must be strictly increasing.")
        return self

    def __len__(self) -> int:
        return self.values.size

    @classmethod
    def from_values(
        cls,
        values: ArrayLike,
        start: datetime.datetime = SERIES_START,
        interval: datetime.timedelta = SERIES_INTERVAL,
        name: str = "value",
    ) -> Self:
        values = np.asarray(values, dtype=np.float64)
        return cls(
            name=name,
            timestamps=time_index(values.size, start=start, interval=interval),
            values=values,
        )

    @classmethod
    def from_frame(cls, data: pl.DataFrame, column: str, date_col: str = "date") -> Self:
        df = data.select(date_col, column).drop_nulls()
        return cls(
            name=column,
            timestamps=df.get_column(date_col).to_list(),
            values=df.get_column(column).cast(pl.Float64).to_numpy(),
        )

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame(
            [
                pl.Series("date", self.timestamps, dtype=pl.Datetime("us")),
                pl.Series(self.name, self.values, dtype=pl.Float64),
            ]
        )


class ProcessSpec(BaseModel):
    """
    Parameters for simulating the intro processes on a shared white noise draw.
    """

    n: int = Field(default=1_000, gt=1)
    seed: int = Field(default=DEFAULT_SEED, ge=0)
    start: datetime.datetime = SERIES_START
    interval: datetime.timedelta = SERIES_INTERVAL
    window: int = Field(default=MA_WINDOW, ge=1)
    intercept: float = AR_INTERCEPT
    coefficient: float = AR_COEFFICIENT
    offset: NoiseOffset = "next"
    drift: float = DRIFT

    @field_validator("window")
    @classmethod
    def odd_window(cls, window: int) -> int:
        if window % 2 == 0:
            raise ValueError(f"Moving average window must be odd, got {window}.")
        return window

    @field_validator("interval")
    @classmethod
    def positive_interval(cls, interval: datetime.timedelta) -> datetime.timedelta:
        if interval <= datetime.timedelta(0):
            raise ValueError(f"Interval must be positive, got {interval}.")
        return interval

    @model_validator(mode="after")
    def window_fits(self) -> Self:
        if self.window > self.n:
            raise ValueError(
                f"Moving average window ({self.window}) is larger than n ({self.n})."
            )
        return self
