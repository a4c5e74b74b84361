import pytest

import numpy as np

from pymwm.estimation import estimate_beta, expected_energy, estimate_gaussian
from pymwm.errors import InvalidConfiguration, ModelMismatch


def test_estimate_beta():

    beta = estimate_beta([65., 4., .5])

    np.testing.assert_allclose(beta, [7.625, 34.])


def test_estimate_beta_white_noise():

    # flat detail energies halve the parameter at each scale
    beta = estimate_beta([9., 1., 1., 1.])

    np.testing.assert_allclose(beta, [4., 2., 1.])


def test_estimate_beta_failure():

    with pytest.raises(ModelMismatch, match='scale 1'):
        estimate_beta([1., 4., 1.])

    # second scale: 0.5 * 0.01 * (beta_0 + 1) - 0.5 < 0
    with pytest.raises(ModelMismatch, match='scale 2'):
        estimate_beta([9., 1., 100.])

    with pytest.raises(InvalidConfiguration):
        estimate_beta([1.])


def test_expected_energy():

    beta = np.array([7.625, 34.])

    energy = expected_energy(beta, 65.)

    np.testing.assert_allclose(energy, [65., 4., .5])
    np.testing.assert_allclose(estimate_beta(energy), beta)


def test_estimate_gaussian():

    mu, sigma = estimate_gaussian([1., 2., 3., 4.])

    assert mu == 2.5
    assert np.isclose(sigma, np.sqrt(5 / 3))

    with pytest.raises(InvalidConfiguration):
        estimate_gaussian([1.])
