"""
Fitting of the multifractal wavelet model.
"""

from .wavelet import (wavelet_analysis, decomposition_level, coarse_blocks,
                      _check_signal)
from .estimation import estimate_beta, estimate_gaussian
from .model import MWM


def _fit(signal, n_blocks, n_scales, warn):

    wt_coefs = wavelet_analysis(signal, n_blocks, n_scales, warn=warn)

    beta = estimate_beta(wt_coefs.energy())
    mu, sigma = estimate_gaussian(wt_coefs.approx)

    return MWM(mu=mu, sigma=sigma, beta=beta)


def fit(data, blocks, warn=True):
    """
    Fit a multifractal wavelet model with Beta-distributed multipliers.

    Parameters
    ----------
    data : ndarray, shape (n_samples,)
        Positive-valued series to model.
    blocks : int
        Minimal number of scaling coefficients at the coarsest scale used to
        estimate the statistics of the wavelet coefficients. Should be at
        least 2.
    warn : bool
        Whether to warn when trailing samples are discarded.

    Returns
    -------
    :class:`~pymwm.model.MWM`

    Notes
    -----
    The number of scales is :math:`S = \\lfloor \\log_2(n / blocks)
    \\rfloor`, after which the number of coarse coefficients is
    :math:`\\lfloor n / 2^S \\rfloor`, which is at least ``blocks``.

    Raises
    ------
    InvalidConfiguration
        If ``blocks < 2``, or the data is not a finite 1-D series.
    InsufficientData
        If no scale can be obtained from the data with ``blocks``
        coefficients.
    ModelMismatch
        If the energy decay of the data leads to a non-positive shape
        parameter.
    """

    signal = _check_signal(data)

    n_scales = decomposition_level(signal.shape[0], blocks)
    n_blocks = coarse_blocks(signal.shape[0], n_scales)

    return _fit(signal, n_blocks, n_scales, warn)


def fit_with_scales(data, scales, warn=True):
    """
    Fit a multifractal wavelet model over a given number of scales.

    Parameters
    ----------
    data : ndarray, shape (n_samples,)
        Positive-valued series to model.
    scales : int
        Number of dyadic scales, at least 1. The number of coarse
        coefficients is :math:`\\lfloor n / 2^{scales} \\rfloor`, and should
        be at least 2.
    warn : bool
        Whether to warn when trailing samples are discarded.

    Returns
    -------
    :class:`~pymwm.model.MWM`

    Raises
    ------
    InvalidConfiguration
        If ``scales < 1``, or the data is not a finite 1-D series.
    InsufficientData
        If fewer than two coarse coefficients are left.
    ModelMismatch
        If the energy decay of the data leads to a non-positive shape
        parameter.
    """

    signal = _check_signal(data)

    n_blocks = coarse_blocks(signal.shape[0], scales)

    return _fit(signal, n_blocks, scales, warn)
