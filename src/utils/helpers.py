import polars as pl

from data_types.errors import InvalidArgument
from globals import LAGS


def select_columns(df: pl.DataFrame, columns: list[str] | None) -> list[str]:
    """
    Retrieves and makes sure that columns exist in df, if None, chooses all columns ex date
    """
    if columns is None:
        return [c for c in df.columns if c != "date"]
    return df.select(columns).columns


def build_lag_df(
    data: pl.DataFrame, column: str, lags: int = LAGS["testing"]
) -> pl.DataFrame:
    """
    Applies the lag operator L, L^2, ..., L^lags to a column, nulls fill the missing past.
    """
    if lags < 1:
        raise InvalidArgument(f"Need at least one lag, got {lags}.")
    return data.select(
        column,
        *[pl.col(column).shift(i).alias(f"{column}_lag_{i}") for i in range(1, lags + 1)],
    )
