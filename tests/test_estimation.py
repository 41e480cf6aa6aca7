import numpy as np
import pytest
from statsmodels.tsa.stattools import acf as sm_acf

from data_types.errors import DivisionByZero, InvalidArgument
from maths.time_series.estimation import (
    acf,
    acf_confidence_band,
    acf_range,
    avf,
    avf_range,
    lagged_pearson,
    sample_mean,
)
from maths.time_series.generators import autoregressive, moving_average


def test_avf_toy_series(toy_series):
    assert sample_mean(toy_series) == 3.0
    assert avf(toy_series, 0) == pytest.approx(2.0)
    assert avf(toy_series, 1) == pytest.approx(0.8)
    assert acf(toy_series, 1) == pytest.approx(0.4)


def test_avf_divides_by_full_length(toy_series):
    # lag 4 only has one pair: (5 - 3) * (1 - 3) = -4
    assert avf(toy_series, 4) == pytest.approx(-4 / 5)


def test_avf_accepts_plain_lists():
    assert avf([1.0, 2.0, 3.0, 4.0, 5.0], 0) == pytest.approx(2.0)
    assert avf((1, 2, 3, 4, 5), 1) == pytest.approx(0.8)


def test_avf_zero_lag_matches_population_variance(long_noise):
    assert np.isclose(avf(long_noise, 0), np.var(long_noise), rtol=1e-9)


def test_avf_empty_series_fails():
    with pytest.raises(InvalidArgument):
        avf([], 0)


@pytest.mark.parametrize("h", [-1, 5, 6, 1.5, True, "1"])
def test_avf_rejects_invalid_lags(toy_series, h):
    with pytest.raises(InvalidArgument):
        avf(toy_series, h)


def test_avf_accepts_numpy_integer_lag(toy_series):
    assert avf(toy_series, np.int64(1)) == pytest.approx(0.8)


@pytest.mark.parametrize("bad", [[1.0, np.nan], [np.inf, 1.0], [[1.0, 2.0], [3.0, 4.0]]])
def test_avf_rejects_bad_series(bad):
    with pytest.raises(InvalidArgument):
        avf(bad, 0)


CONSTANTS = [(5.0, 3), (0.1, 3), (1.1, 7), (0.3, 1_000), (-2.7, 50)]


@pytest.mark.parametrize("value, n_obs", CONSTANTS)
def test_acf_constant_series_fails(value, n_obs):
    # 0.1 and friends have an inexact float mean, so gamma_0 is tiny but not zero
    series = [value] * n_obs
    for h in (0, 1):
        with pytest.raises(DivisionByZero):
            acf(series, h)
    with pytest.raises(DivisionByZero):
        acf_range(series, 1)


@pytest.mark.parametrize("value, n_obs", CONSTANTS)
def test_avf_constant_series_is_finite(value, n_obs):
    assert avf([value] * n_obs, 0) == pytest.approx(0.0, abs=1e-12)


def test_acf_single_observation_fails():
    with pytest.raises(DivisionByZero):
        acf([1.0], 0)


def test_acf_lag_zero_is_one(long_noise):
    assert acf(long_noise, 0) == 1.0
    assert acf([3.0, -1.0, 7.5, 2.0], 0) == 1.0


@pytest.mark.parametrize("h", [0, 1, 2, 5])
def test_avf_reversal_symmetry(long_noise, h):
    s = long_noise[:500]
    assert np.isclose(avf(s, h), avf(s[::-1], h), rtol=1e-12, atol=1e-15)


def test_acf_range_bound_for_white_noise(long_noise):
    for h in range(1, 21):
        rho = acf(long_noise, h)
        assert -1.05 <= rho <= 1.05
        assert abs(rho) < 0.05


def test_acf_is_not_clamped():
    # tiny adversarial sample, the estimate itself is still a valid number
    rho = acf([0.0, 1.0, 0.0, 1.0], 1)
    assert rho == pytest.approx(-0.75)


def test_matches_statsmodels(long_noise):
    series = autoregressive(long_noise[:2_000])
    ours = acf_range(series, 10)
    theirs = sm_acf(series, nlags=10, adjusted=False, fft=False)
    np.testing.assert_allclose(ours, theirs, rtol=1e-9, atol=1e-12)


def test_ranges_match_scalar_estimators(long_noise):
    series = long_noise[:300]
    gammas = avf_range(series, 4)
    rhos = acf_range(series, 4)

    assert gammas.shape == (5,)
    for h in range(5):
        assert np.isclose(gammas[h], avf(series, h))
        assert np.isclose(rhos[h], acf(series, h))


def test_ranges_reject_invalid_max_lag(toy_series):
    with pytest.raises(InvalidArgument):
        avf_range(toy_series, 5)
    with pytest.raises(DivisionByZero):
        acf_range([2.0, 2.0], 1)


def test_moving_average_estimates_recover_theory(long_noise):
    ma = moving_average(long_noise, 3)
    assert avf(ma, 0) == pytest.approx(3 / 9, abs=0.02)
    assert avf(ma, 1) == pytest.approx(2 / 9, abs=0.02)
    assert acf(ma, 1) == pytest.approx(2 / 3, abs=0.04)
    assert acf(ma, 3) == pytest.approx(0.0, abs=0.04)


def test_autoregressive_estimates_recover_theory(long_noise):
    ar = autoregressive(long_noise, intercept=5.0, coefficient=0.7)
    assert sample_mean(ar) == pytest.approx(5.0, abs=0.05)
    assert avf(ar, 0) == pytest.approx(1.49, abs=0.08)
    assert acf(ar, 1) == pytest.approx(-0.7 / 1.49, abs=0.03)


def test_lagged_pearson_close_to_acf(long_noise):
    ar = autoregressive(long_noise)
    assert lagged_pearson(ar, 1) == pytest.approx(acf(ar, 1), abs=1e-3)
    assert lagged_pearson(ar, 0) == pytest.approx(1.0)


def test_lagged_pearson_matches_numpy(long_noise):
    s = long_noise[:100]
    expected = np.corrcoef(s[:-2], s[2:])[0, 1]
    assert lagged_pearson(s, 2) == pytest.approx(expected, rel=1e-9)


def test_lagged_pearson_errors():
    with pytest.raises(InvalidArgument):
        lagged_pearson([1.0, 2.0, 3.0], 2)
    with pytest.raises(DivisionByZero):
        lagged_pearson([1.0, 1.0, 1.0, 4.0], 1)


@pytest.mark.parametrize("value, n_obs", CONSTANTS)
def test_lagged_pearson_constant_series_fails(value, n_obs):
    with pytest.raises(DivisionByZero):
        lagged_pearson([value] * n_obs, 1)


def test_lagged_pearson_constant_slice_fails():
    # only the present slice [0.1, 0.1, 0.1] is constant
    with pytest.raises(DivisionByZero):
        lagged_pearson([0.7, 0.1, 0.1, 0.1], 1)


def test_acf_confidence_band():
    assert acf_confidence_band(10_000) == pytest.approx(1.959964 / 100, rel=1e-5)
    with pytest.raises(InvalidArgument):
        acf_confidence_band(0)
    with pytest.raises(InvalidArgument):
        acf_confidence_band(100, sign_lvl=1.5)
