import pytest

import numpy as np

from pymwm.wavelet import (wavelet_analysis, wavelet_energy, mean_square,
                           decomposition_level, coarse_blocks)
from pymwm.errors import InvalidConfiguration, InsufficientData


def test_decomposition_level():

    assert decomposition_level(42, 5) == 3
    assert decomposition_level(40, 5) == 3
    assert decomposition_level(39, 5) == 2
    assert decomposition_level(10, 5) == 1
    assert decomposition_level(1024, 2) == 9


def test_decomposition_level_failure():

    with pytest.raises(InvalidConfiguration):
        decomposition_level(42, 0)
    with pytest.raises(InvalidConfiguration):
        decomposition_level(42, 1)
    with pytest.raises(InsufficientData):
        decomposition_level(9, 5)


def test_coarse_blocks():

    assert coarse_blocks(42, 3) == 5
    assert coarse_blocks(42, 1) == 21

    with pytest.raises(InvalidConfiguration):
        coarse_blocks(42, 0)
    with pytest.raises(InsufficientData):
        coarse_blocks(42, 5)


def test_partition(ramp):

    WT = wavelet_analysis(ramp, 2, 2)

    assert WT.coefs.shape == (8,)
    assert [len(WT.get_block(i)) for i in range(3)] == [2, 2, 4]
    assert len(WT.details) == 2

    # orthonormal haar: coarse coefficients are sums over 4 samples / 2
    np.testing.assert_allclose(WT.approx, [3., 11.])
    np.testing.assert_allclose(np.abs(WT.get_block(1)), [2., 2.])
    np.testing.assert_allclose(np.abs(WT.get_block(2)), np.sqrt(.5))

    with pytest.raises(IndexError):
        WT.get_block(3)


def test_energy(ramp):

    WT = wavelet_analysis(ramp, 2, 2)

    energy = wavelet_energy(WT)

    assert energy.shape == (3,)
    np.testing.assert_allclose(energy, [65., 4., .5])
    np.testing.assert_allclose(WT.energy(), energy)


def test_energy_preserved(reference):

    X = reference['fit']['data'][:40]

    WT = wavelet_analysis(X, 5, 3)

    assert np.isclose(np.sum(WT.coefs ** 2), np.sum(X ** 2))


def test_mean_square():

    assert mean_square([1., -1., 3., -3.]) == 5.


def test_truncation(reference):

    X = reference['fit']['data']

    with pytest.warns(UserWarning, match='2 are discarded'):
        WT = wavelet_analysis(X, 5, 3)

    np.testing.assert_array_equal(
        WT.coefs, wavelet_analysis(X[:40], 5, 3).coefs)


def test_wavelet_failure(reference):

    X = reference['fit']['data']

    with pytest.raises(InvalidConfiguration):
        wavelet_analysis(X, 0, 3)
    with pytest.raises(InvalidConfiguration):
        wavelet_analysis(X, 5, 0)
    with pytest.raises(InsufficientData):
        wavelet_analysis(X, 6, 3)
    with pytest.raises(InvalidConfiguration):
        wavelet_analysis(np.ones((8, 2)), 2, 2)
    with pytest.raises(InvalidConfiguration):
        wavelet_analysis(np.r_[np.ones(7), np.nan], 2, 2)
