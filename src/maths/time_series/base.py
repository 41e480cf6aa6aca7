import math
from dataclasses import dataclass
from typing import TypedDict

import numpy as np
from numpy.typing import ArrayLike
from scipy.stats import norm

from data_types.errors import InvalidArgument
from data_types.vectors import as_int, as_series
from globals import DEFAULT_ROUNDING, LAGS, SIGN_LVL
from maths.time_series.estimation import acf


@dataclass(frozen=True, slots=True)
class HypTestRes:
    stat: float
    p_val: float
    sign_lvl: float
    null: str
    reject_null: bool
    desc: str


class HypTestConclusion(TypedDict):
    reject_null: bool
    desc: str


def _check_sign_lvl(sign_lvl: float) -> float:
    if not 0 < sign_lvl < 1:
        raise InvalidArgument(f"Significance level must be in (0, 1), got {sign_lvl}.")
    return float(sign_lvl)


def hyp_test_conclusion(
    p_val: float, null_hyp: str, sign_lvl: float = SIGN_LVL
) -> HypTestConclusion:
    reject = p_val < sign_lvl
    verdict = "Reject" if reject else "Fail to reject"
    return {
        "reject_null": reject,
        "desc": f"{verdict} null hypothesis of {null_hyp} at {sign_lvl} significance.",
    }


def format_hyp_test_result(
    stat: float,
    p_val: float,
    null: str = "No autocorrelation",
    sign_lvl: float = SIGN_LVL,
) -> HypTestRes:
    """
    Rounds stat and p_val and decides the test at sign_lvl.
    """
    sign_lvl = _check_sign_lvl(sign_lvl)
    try:
        stat = float(stat)
        p_val = float(p_val)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid stat or p_val: stat={stat}, p_val={p_val}")

    if math.isnan(stat) or math.isnan(p_val):
        raise ValueError(f"Invalid stat or p_val: stat={stat}, p_val={p_val}")

    # decided on the unrounded p-value
    conclusion = hyp_test_conclusion(p_val, null_hyp=null, sign_lvl=sign_lvl)

    return HypTestRes(
        stat=round(stat, DEFAULT_ROUNDING),
        p_val=round(p_val, DEFAULT_ROUNDING),
        sign_lvl=sign_lvl,
        null=null,
        reject_null=conclusion["reject_null"],
        desc=conclusion["desc"],
    )


def white_noise_lag_test(
    series: ArrayLike, h: int, sign_lvl: float = SIGN_LVL
) -> HypTestRes:
    """
    Tests rho(h) = 0 using the large sample normal approximation sqrt(n) * rho_hat(h) ~ N(0, 1).

    Raises DivisionByZero for a constant series, whose ACF is undefined.
    """
    data = as_series(series)
    h = as_int(h, "Lag")
    if h < 1:
        raise InvalidArgument(f"White noise test needs a lag >= 1, got {h}.")

    rho = acf(data, h)
    z = abs(rho) * np.sqrt(data.size)
    p_val = float(2 * norm.sf(z))

    return format_hyp_test_result(
        stat=rho,
        p_val=p_val,
        null=f"No autocorrelation at lag {h}",
        sign_lvl=sign_lvl,
    )


def white_noise_lag_tests(
    series: ArrayLike, lags: int = LAGS["testing"], sign_lvl: float = SIGN_LVL
) -> dict[str, HypTestRes]:
    data = as_series(series)
    return {
        f"lag_{h}": white_noise_lag_test(data, h, sign_lvl=sign_lvl)
        for h in range(1, lags + 1)
    }
