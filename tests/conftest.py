import numpy as np
import pytest

from maths.time_series.generators import white_noise


@pytest.fixture
def toy_series() -> np.ndarray:
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture(scope="module")
def long_noise() -> np.ndarray:
    return white_noise(20_000, seed=20250112)
