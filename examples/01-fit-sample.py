"""
.. _fit_sample:

==================================
Fitting and sampling an MWM
==================================
"""

# %% [markdown]
# The ``pymwm`` package fits a multifractal wavelet model to a positive
# series, and synthesizes new paths sharing its multiscale energy decay.
#
# Let us first build a positive series from a known model, with 4 coarse
# coefficients and 10 scales.

# %% [python]

import matplotlib.pyplot as plt
import numpy as np
from pymwm import MWM, fit, wavelet_analysis
from pymwm.viz import plot_energy, plot_paths

rng = np.random.default_rng(0)

X = np.concatenate([
    MWM(mu=40., sigma=2., beta=[8., 6., 4., 4., 3., 3., 2., 2., 2., 2.])
    .sample(rng) for _ in range(4)])

##############################################################################
#
# Fitting
# -------

# %% [markdown]
# :func:`pymwm.fit` takes the minimal number of coarse scaling coefficients,
# and derives the number of scales from the length of the series.

# %%
model = fit(X, blocks=4)
print(model.beta)

WT = wavelet_analysis(X, 4, model.n_scales)
plot_energy(WT, model)
plt.show()

##############################################################################
#
# Sampling
# --------

# %%
paths = model.sample(rng, shape=3)
plot_paths(paths)
plt.show()
