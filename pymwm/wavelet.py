"""
Haar decomposition of a series into coarse scaling coefficients and detail
coefficients, and the per-scale energies derived from it.
"""

import warnings
from dataclasses import dataclass

import pywt
import numpy as np

from .errors import InvalidConfiguration, InsufficientData


def _check_signal(signal):
    """
    Cast the input to a 1-D float array of finite values
    """

    signal = np.asarray(signal, dtype=float)

    if signal.ndim != 1:
        raise InvalidConfiguration(
            f"Expected a 1-D series, got an array of shape {signal.shape}")

    if not np.isfinite(signal).all():
        raise InvalidConfiguration("The series contains non-finite values")

    return signal


def decomposition_level(length, n_blocks):
    """
    Number of dyadic scales available for a signal of given length, keeping
    at least ``n_blocks`` scaling coefficients at the coarsest scale.

    Parameters
    ----------
    length : int
        Length of the signal considered
    n_blocks : int
        Minimal number of coarse scaling coefficients, at least 2.

    Returns
    -------
    n_scales : int
        The number of scales, :math:`\\lfloor \\log_2(length / n_blocks)
        \\rfloor`
    """

    if n_blocks < 2:
        raise InvalidConfiguration(
            f"The number of blocks should be at least 2, got {n_blocks}")

    if length < 2 * n_blocks:
        raise InsufficientData(
            f"{n_blocks} blocks is too high for {length} samples: not enough "
            "data for a single scale")

    # integer version of floor(log2(length / n_blocks))
    return int(length // n_blocks).bit_length() - 1


def coarse_blocks(length, n_scales):
    """
    Number of coarse scaling coefficients obtained when decomposing a signal
    of given length over ``n_scales`` scales.

    Parameters
    ----------
    length : int
        Length of the signal considered
    n_scales : int
        Number of dyadic scales, at least 1.

    Returns
    -------
    n_blocks : int
    """

    if n_scales < 1:
        raise InvalidConfiguration(
            f"The number of scales should be positive, got {n_scales}")

    n_blocks = length // 2 ** n_scales

    if n_blocks < 2:
        raise InsufficientData(
            f"{n_scales} scales is too high for {length} samples: fewer than "
            "2 coarse coefficients left")

    return n_blocks


def mean_square(x):
    """
    Average of the squared values of ``x``
    """
    x = np.asarray(x)
    return np.dot(x, x) / x.shape[0]


@dataclass(kw_only=True, frozen=True, eq=False)
class WaveletDec:
    r"""
    Haar wavelet decomposition of a truncated series.

    .. note:: Should not be instantiated directly but instead created using
        the `wavelet_analysis` function.

    Attributes
    ----------
    coefs : ndarray, shape (n_blocks * 2 ** n_scales,)
        Coefficient buffer. The first ``n_blocks`` values are the coarse
        scaling coefficients, followed by the detail coefficients of each
        scale from the coarsest to the finest. Detail block :math:`i` holds
        ``n_blocks * 2 ** (i - 1)`` values.
    n_blocks : int
        Number of scaling coefficients at the coarsest scale.
    n_scales : int
        Number of decomposition levels.
    """
    coefs: np.ndarray
    n_blocks: int
    n_scales: int

    def _block_bounds(self, i):

        if i == 0:
            return 0, self.n_blocks

        return self.n_blocks * 2 ** (i - 1), self.n_blocks * 2 ** i

    def get_block(self, i):
        """
        Returns block ``i`` of the buffer: the scaling coefficients for
        ``i = 0``, otherwise the detail coefficients of the ``i``-th scale,
        counted from the coarsest.
        """

        if not 0 <= i <= self.n_scales:
            raise IndexError(
                f"Block index should be in [0, {self.n_scales}], got {i}")

        start, stop = self._block_bounds(i)
        return self.coefs[start:stop]

    @property
    def approx(self):
        """Coarse scaling coefficients."""
        return self.get_block(0)

    @property
    def details(self):
        """Detail coefficients, coarsest scale first."""
        return [self.get_block(i) for i in range(1, self.n_scales + 1)]

    def energy(self):
        """
        Mean-square of every block, see :func:`wavelet_energy`.
        """
        return wavelet_energy(self)


def wavelet_energy(wt_coefs):
    """
    Computes the energy sequence of a decomposition.

    Parameters
    ----------
    wt_coefs : :class:`WaveletDec`

    Returns
    -------
    energy : ndarray, shape (n_scales + 1,)
        ``energy[0]`` is the mean-square of the scaling coefficients,
        ``energy[k]`` that of the detail coefficients at scale ``k``, counted
        from the coarsest.
    """

    return np.array([mean_square(wt_coefs.get_block(i))
                     for i in range(wt_coefs.n_scales + 1)])


def wavelet_analysis(signal, n_blocks, n_scales, warn=True):
    """
    Compute the Haar wavelet decomposition of the leading
    ``n_blocks * 2 ** n_scales`` samples of a series.

    Parameters
    ----------
    signal : ndarray, shape (n_samples,)
        Time series to analyze.
    n_blocks : int
        Number of scaling coefficients at the coarsest scale, at least 2.
    n_scales : int
        Number of decomposition levels, at least 1.
    warn : bool
        Whether to warn when trailing samples are discarded.

    Returns
    -------
    WaveletDec
        Wavelet coefficient representation of the signal

    Notes
    -----
    The transform is orthonormal and decimating, and operates in the
    ``'periodization'`` mode of PyWavelets [1]_. Since the truncated length is
    a multiple of ``2 ** n_scales`` no coefficient is affected by border
    effects.

    References
    ----------

    .. [1] https://pywavelets.readthedocs.io/en/latest/ref/signal-extension-modes.html
    """

    signal = _check_signal(signal)

    if n_blocks < 2:
        raise InvalidConfiguration(
            f"The number of blocks should be at least 2, got {n_blocks}")
    if n_scales < 1:
        raise InvalidConfiguration(
            f"The number of scales should be positive, got {n_scales}")

    length = n_blocks * 2 ** n_scales

    if length > signal.shape[0]:
        raise InsufficientData(
            f"{n_blocks} blocks over {n_scales} scales need {length} samples, "
            f"got {signal.shape[0]}")

    if length < signal.shape[0] and warn:
        warnings.warn(
            f"Only the first {length} samples are used, the last "
            f"{signal.shape[0] - length} are discarded", UserWarning)

    # [cA_n, cD_n, ..., cD_1]: coarse to fine, matching the buffer layout
    coefs = pywt.wavedec(signal[:length], pywt.Wavelet('haar'),
                         mode='periodization', level=n_scales)
    coefs = np.concatenate(coefs)
    coefs.flags.writeable = False

    return WaveletDec(coefs=coefs, n_blocks=n_blocks, n_scales=n_scales)
