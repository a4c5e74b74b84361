"""
Diagnostic plots for multifractal wavelet models.
"""

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .wavelet import WaveletDec


def plot_energy(wt_coefs, model=None, ax=None, fmt='--.', color='grey',
                fit_color='k', lw_fit=2):
    r"""
    Plot the energy decay :math:`\log_2 E_j` across scales.

    Parameters
    ----------
    wt_coefs : :class:`~pymwm.wavelet.WaveletDec`
        Decomposition of the data.
    model : :class:`~pymwm.model.MWM` | None
        If given, the energy decay implied by the model, starting from the
        energy of the coarse scaling coefficients, is overlaid.
    ax : :class:`~matplotlib.axes.Axes` | None
        Axes where to plot.

    Returns
    -------
    ax : :class:`~matplotlib.axes.Axes`
    """

    if not isinstance(wt_coefs, WaveletDec):
        raise TypeError(
            f'Expected a WaveletDec, got {type(wt_coefs).__name__}')

    if ax is None:
        _, ax = plt.subplots()

    energy = wt_coefs.energy()
    j = np.arange(energy.shape[0])

    ax.plot(j, np.log2(energy), fmt, color=color, label='data')

    if model is not None:
        expected = model.expected_energy(energy[0])
        ax.plot(j, np.log2(expected), color=fit_color, linewidth=lw_fit,
                label='MWM')
        ax.legend()

    ax.set_xlabel('j (coarse to fine)')
    ax.set_ylabel(r'$\log_2 E_j$')
    ax.set_xticks(j)

    return ax


def plot_paths(paths, ax=None, cmap='magma', lw=1):
    """
    Plot synthesized paths.

    Parameters
    ----------
    paths : ndarray, shape (n_samples,) | (n_samples, n_realisations)
    ax : :class:`~matplotlib.axes.Axes` | None
        Axes where to plot.
    cmap : str
        Name of the seaborn palette used to color the realizations.

    Returns
    -------
    ax : :class:`~matplotlib.axes.Axes`
    """

    if paths.ndim == 1:
        paths = paths[:, None]

    if ax is None:
        _, ax = plt.subplots()

    colors = sns.color_palette(cmap, n_colors=paths.shape[1])

    for i in range(paths.shape[1]):
        ax.plot(paths[:, i], color=colors[i], linewidth=lw)

    ax.set_xlabel('t')

    return ax
