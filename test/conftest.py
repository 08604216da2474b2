import numpy as np
import pytest

from planar_dubins import State


@pytest.fixture
def random_pose_pairs():
    """Generate random start/goal configurations for testing."""
    np.random.seed(42)
    configs = []
    for _ in range(50):
        p0 = np.random.rand(2) * 10
        p1 = np.random.rand(2) * 10
        psi0 = np.random.rand() * 2 * np.pi - np.pi
        psi1 = np.random.rand() * 2 * np.pi - np.pi
        R = 0.5 + np.random.rand() * 2
        configs.append((State(p0[0], p0[1], psi0), State(p1[0], p1[1], psi1), R))
    return configs
