# %% imports
from pprint import pprint as print

from maths.time_series import (
    acf,
    apply_lag_polynomial,
    avf,
    lag,
    lagged_pearson,
    white_noise_lag_tests,
)
from maths.time_series.theory import (
    autoregressive_avf,
    moving_average_acf,
    moving_average_avf,
)
from methods.process_pipeline import (
    correlogram,
    processes_frame,
    simulate_processes,
)
from models.time_series import ProcessSpec

# %% one year of minutes, same shape as the intro series
spec = ProcessSpec(n=525_600)
processes = simulate_processes(spec)
df = processes_frame(processes)
print(df.head(5))

# =========================
# Moving average: AVF / ACF
# =========================
ma = processes["moving_average"].values

print({"true_gamma_0": moving_average_avf(0), "est_gamma_0": avf(ma, 0)})
print({"true_gamma_1": moving_average_avf(1), "est_gamma_1": avf(ma, 1)})
print({"true_rho_1": moving_average_acf(1), "est_rho_1": acf(ma, 1)})
print({"true_rho_3": moving_average_acf(3), "est_rho_3": acf(ma, 3)})

# =========================
# Autoregressive estimation
# =========================
ar = processes["autoregressive"].values

print({"true_gamma": autoregressive_avf(0), "by_hand": avf(ar, 0)})
print({"by_hand": acf(ar, 1), "pearson": lagged_pearson(ar, 1)})
print(correlogram(ar, max_lag=5))

# %% lag operator, y_t = 5 + (1 - 0.7 L) w_t
noise = processes["white_noise"].values
y = 5.0 + apply_lag_polynomial(noise, [1.0, -0.7])
past, present = lag(y, 1)
print({"lagged_slices": (past.size, present.size), "rho_1": acf(y, 1)})

# %% random walks are far from white noise
print(white_noise_lag_tests(processes["random_walk_drift"].values, lags=3))
