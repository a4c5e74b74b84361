import pytest

import numpy as np
import matplotlib.pyplot as plt

from pymwm import fit, wavelet_analysis
from pymwm.viz import plot_energy, plot_paths


@pytest.mark.viz
def test_plots(reference):

    X = reference['fit']['data'][:40]

    WT = wavelet_analysis(X, 5, 3)
    model = fit(X, 5)

    ax = plot_energy(WT)
    assert len(ax.lines) == 1

    fig, ax = plt.subplots()
    plot_energy(WT, model, ax=ax)
    assert len(ax.lines) == 2

    config = reference['sample']
    model = fit(config['data'], config['blocks'], warn=False)

    plot_paths(model.sample(rng=0))
    ax = plot_paths(model.sample(rng=1, shape=3))
    assert len(ax.lines) == 3

    with pytest.raises(TypeError):
        plot_energy(X)

    plt.close('all')
