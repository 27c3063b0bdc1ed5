import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from feedforward.pattern import Pattern


@pytest.fixture
def xor_patterns():
    """The four XOR patterns."""
    return [
        Pattern([0, 0], [0]),
        Pattern([0, 1], [1]),
        Pattern([1, 0], [1]),
        Pattern([1, 1], [0]),
    ]


@pytest.fixture
def rng():
    return np.random.default_rng(42)
