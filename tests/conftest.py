import json
from pathlib import Path

import pytest
import numpy as np


def pytest_configure(config):
    config.addinivalue_line("markers", "viz: plotting tests")


@pytest.fixture(scope="session")
def reference():

    with open(Path(__file__).parent / 'reference_series.json', 'rb') as f:
        config = json.load(f)

    for case in config.values():
        case['data'] = np.array(case['data'])

    return config


@pytest.fixture
def ramp():
    return np.arange(8, dtype=float)
