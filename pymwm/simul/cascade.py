"""
Synthesis of multifractal wavelet model paths through a dyadic
multiplicative cascade.
"""

import numpy as np

from ..errors import InvalidConfiguration, ModelMismatch


def cascade(root, model, rng):
    """
    Expand non-negative root values down the levels of the cascade.

    Parameters
    ----------
    root : ndarray, shape (R,)
        Value of the root node of each of the R realizations.
    model : :class:`~pymwm.model.MWM`
        Provides the multiplier distribution of each level.
    rng : :class:`numpy.random.Generator`

    Returns
    -------
    paths : ndarray, shape (2 ** n_scales, R)

    Notes
    -----
    At level :math:`i` the node :math:`j < 2^i` is split into
    :math:`(1 + a) x` at position :math:`2j` and :math:`(1 - a) x` at
    position :math:`2j + 1`. Multipliers are drawn from the last node
    :math:`2^i - 1` down to the first. All parents of a level are read
    before any child is written, so a single buffer of the final length is
    enough.
    """

    root = np.atleast_1d(np.asarray(root, dtype=float))

    paths = np.empty((model.length, root.shape[0]))
    paths[0] = root

    for i in range(model.n_scales):

        n_nodes = 2 ** i

        a = model.multiplier(i).rvs(size=paths[:n_nodes].shape,
                                    random_state=rng)
        # draws are handed out from the last node down to the first
        a = a[::-1]

        parents = paths[:n_nodes]
        left, right = (1 + a) * parents, (1 - a) * parents

        paths[0:2*n_nodes:2] = left
        paths[1:2*n_nodes:2] = right

    return paths


def sample(model, rng=None, shape=None):
    """
    Create realizations of a multifractal wavelet model.

    Parameters
    ----------
    model : :class:`~pymwm.model.MWM`
        Fitted model, with S shape parameters.
    rng : :class:`numpy.random.Generator` | int | None
        Source of randomness, passed to :func:`numpy.random.default_rng`.
        The generator is consumed by this call and should not be shared with
        concurrent calls.
    shape : int | None
        Number of realizations R. If None, a single path is returned.

    Returns
    -------
    paths : ndarray
        Synthesized non-negative paths. If `shape` is None, of shape
        ``(2 ** S,)``. Otherwise, of shape ``(2 ** S, R)``.

    Raises
    ------
    ModelMismatch
        If a root value drawn from the Gaussian is negative, in which case
        the positive cascade cannot be built.
    """

    if shape is None:
        R = 1
        do_squeeze = True
    else:
        R = shape
        do_squeeze = False

    if R < 1:
        raise InvalidConfiguration(
            f'Number of realizations should be positive, got {R}')

    rng = np.random.default_rng(rng)

    root = model.gaussian().rvs(size=R, random_state=rng)
    root = 2 ** (-model.n_scales / 2) * np.atleast_1d(root)

    if (root < 0).any():
        raise ModelMismatch(
            "The model is not appropriate for the data: drew a negative "
            f"root value {root.min()}")

    paths = cascade(root, model, rng)

    return paths[:, 0] if do_squeeze else paths
