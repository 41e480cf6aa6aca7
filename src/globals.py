import datetime

from pydantic import ConfigDict

DEFAULT_ROUNDING = 4

SIGN_LVL = 0.05

LAGS = {"testing": 2, "strict": 10}

model_cfg = ConfigDict(arbitrary_types_allowed=True)

# Same seed as the white noise examples in the intro notebooks
DEFAULT_SEED = 8092

MA_WINDOW = 3

# y_t = 5 + w_t - 0.7 w_{t-1}
AR_INTERCEPT = 5.0
AR_COEFFICIENT = 0.7

DRIFT = 0.2

SERIES_START = datetime.datetime(2018, 1, 1, 1)
SERIES_INTERVAL = datetime.timedelta(minutes=1)
