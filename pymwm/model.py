"""
Multifractal wavelet model with Beta-distributed multipliers.
"""

from dataclasses import dataclass

import numpy as np
from scipy import stats

from .errors import InvalidConfiguration, ModelMismatch
from .estimation import expected_energy
from .simul.cascade import sample


@dataclass(frozen=True, eq=False)
class MWM:
    r"""
    Multifractal wavelet model.

    The coarsest scaling coefficient follows a Gaussian distribution, and at
    each finer scale every value is split in two by a multiplier
    :math:`1 \pm A_i`, with :math:`A_i` following a Beta(:math:`\beta_i`,
    :math:`\beta_i`) distribution rescaled to :math:`[-1, 1]`.

    .. note:: Usually obtained from :func:`~pymwm.fit` or
        :func:`~pymwm.fit_with_scales`.

    Attributes
    ----------
    mu : float
        Mean of the coarse scaling coefficients.
    sigma : float
        Standard deviation of the coarse scaling coefficients.
    beta : ndarray, shape (n_scales,)
        Shape parameters of the multipliers, coarse to fine. Read-only.
    """
    mu: float
    sigma: float
    beta: np.ndarray

    def __post_init__(self):

        beta = np.array(self.beta, dtype=float).reshape(-1)

        if beta.shape[0] == 0:
            raise InvalidConfiguration(
                "The model needs at least one shape parameter")
        if not np.isfinite(beta).all():
            raise InvalidConfiguration("Shape parameters should be finite")
        if (beta <= 0).any():
            raise ModelMismatch(
                f"Shape parameters should be positive, got {beta}")
        if not (np.isfinite(self.mu) and np.isfinite(self.sigma)):
            raise InvalidConfiguration("mu and sigma should be finite")
        if self.sigma < 0:
            raise InvalidConfiguration(
                f"sigma should be non-negative, got {self.sigma}")

        beta.flags.writeable = False

        object.__setattr__(self, 'mu', float(self.mu))
        object.__setattr__(self, 'sigma', float(self.sigma))
        object.__setattr__(self, 'beta', beta)

    def __eq__(self, other):

        if not isinstance(other, MWM):
            return NotImplemented

        return (self.mu == other.mu and self.sigma == other.sigma
                and np.array_equal(self.beta, other.beta))

    @property
    def n_scales(self):
        """Number of cascade levels."""
        return self.beta.shape[0]

    @property
    def length(self):
        """Length of a sampled path."""
        return 2 ** self.n_scales

    def gaussian(self):
        """
        Distribution of the coarse scaling coefficient.

        Returns
        -------
        :class:`scipy.stats.rv_continuous` frozen distribution
        """
        return stats.norm(loc=self.mu, scale=self.sigma)

    def multiplier(self, scale):
        """
        Distribution of the multipliers applied at a given level.

        Parameters
        ----------
        scale : int
            Level index, 0 being the coarsest.

        Returns
        -------
        :class:`scipy.stats.rv_continuous` frozen distribution
            Beta distribution supported on :math:`[-1, 1]`.
        """
        b = self.beta[scale]
        return stats.beta(b, b, loc=-1, scale=2)

    def expected_energy(self, e0=None):
        """
        Energy sequence implied by the model.

        Parameters
        ----------
        e0 : float | None
            Energy of the coarse scaling coefficients. Defaults to the second
            moment of the Gaussian, ``mu ** 2 + sigma ** 2``.

        Returns
        -------
        ndarray, shape (n_scales + 1,)
        """

        if e0 is None:
            e0 = self.mu ** 2 + self.sigma ** 2

        return expected_energy(self.beta, e0)

    def sample(self, rng=None, shape=None):
        """
        Synthesize paths from the model, see :func:`pymwm.simul.sample`.
        """
        return sample(self, rng=rng, shape=shape)
