"""
Estimation of the MWM parameters from the wavelet energies and the coarse
scaling coefficients.
"""

import numpy as np

from .errors import InvalidConfiguration, ModelMismatch


def estimate_beta(energy):
    r"""
    Estimate the shape parameters of the Beta multipliers from the energy
    sequence of a wavelet decomposition.

    Parameters
    ----------
    energy : ndarray, shape (n_scales + 1,)
        Mean-square of the scaling coefficients followed by that of the
        detail coefficients, coarsest scale first.

    Returns
    -------
    beta : ndarray, shape (n_scales,)
        Shape parameter of the symmetric Beta multiplier distribution at each
        scale, coarse to fine.

    Notes
    -----
    Under the MWM the ratio of adjacent energies only depends on the
    multiplier distributions, which gives the recursion

    .. math::

        \beta_i = \frac{1}{2} \frac{E_i}{E_{i+1}} (\beta_{i-1} + 1)
                  - \frac{1}{2}, \qquad \beta_{-1} = 0

    Raises
    ------
    ModelMismatch
        As soon as a non-positive parameter is found.
    """

    energy = np.asarray(energy, dtype=float)

    if energy.ndim != 1 or energy.shape[0] < 2:
        raise InvalidConfiguration(
            "At least two energies are needed to estimate a shape parameter")

    n_scales = energy.shape[0] - 1
    beta = np.empty(n_scales)
    prev = 0.

    for i in range(n_scales):

        eta = energy[i] / energy[i + 1]
        beta[i] = eta * 0.5 * (prev + 1.) - 0.5

        # zero energies give nan or inf
        if not (np.isfinite(beta[i]) and beta[i] > 0):
            raise ModelMismatch(
                f"The model is not appropriate for the data: shape parameter "
                f"at scale {i + 1} is {beta[i]}")

        prev = beta[i]

    return beta


def expected_energy(beta, e0):
    """
    Energy sequence implied by a set of shape parameters.

    Inverts the recursion of :func:`estimate_beta`, starting from the energy
    ``e0`` of the coarse scaling coefficients.

    Parameters
    ----------
    beta : ndarray, shape (n_scales,)
    e0 : float

    Returns
    -------
    energy : ndarray, shape (n_scales + 1,)
    """

    beta = np.asarray(beta, dtype=float)

    energy = np.empty(beta.shape[0] + 1)
    energy[0] = e0
    prev = 0.

    for i, b in enumerate(beta):
        energy[i + 1] = energy[i] * (prev + 1) / (2 * b + 1)
        prev = b

    return energy


def estimate_gaussian(approx):
    """
    Fit a Gaussian to the coarse scaling coefficients.

    Parameters
    ----------
    approx : ndarray, shape (n_blocks,)

    Returns
    -------
    mu : float
        Sample mean
    sigma : float
        Square root of the unbiased sample variance
    """

    approx = np.asarray(approx, dtype=float)

    if approx.shape[0] < 2:
        raise InvalidConfiguration(
            "At least two scaling coefficients are needed to estimate the "
            "standard deviation")

    return float(np.mean(approx)), float(np.sqrt(np.var(approx, ddof=1)))
