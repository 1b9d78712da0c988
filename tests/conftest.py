"""Pytest configuration and shared fixtures for profit_curves tests.

This module provides pytest configuration, shared fixtures, and test utilities
that are available across all test modules.
"""

import numpy as np
import pytest

from profit_curves import CostModel, ScoredDataset


def pytest_configure(config):
    """Configure pytest settings and custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running (>1 second)")
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "edge_case: mark test as an edge case test")
    config.addinivalue_line("markers", "validation: mark test as a validation test")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit/" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration/" in path:
            item.add_marker(pytest.mark.integration)
        elif "edge_cases/" in path:
            item.add_marker(pytest.mark.edge_case)
        elif "validation/" in path:
            item.add_marker(pytest.mark.validation)


def pytest_runtest_setup(item):
    """Skip slow tests unless explicitly requested."""
    if item.get_closest_marker("slow"):
        if not item.config.getoption("--runslow", default=False):
            pytest.skip("need --runslow option to run slow tests")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )


@pytest.fixture(scope="session")
def random_state():
    """Provide a consistent random state for reproducible tests."""
    return np.random.RandomState(42)


@pytest.fixture
def lead_cost_model():
    """Sale worth 400 net, wasted contact costs 600."""
    return CostModel(benefit_true_positive=400, cost_false_positive=-600)


@pytest.fixture
def small_dataset():
    """Ten leads, already in descending score order, 6 buyers."""
    scores = [0.95, 0.9, 0.85, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.1]
    labels = [1, 1, 0, 1, 1, 0, 1, 0, 1, 0]
    return ScoredDataset.from_predictions(scores, labels)


@pytest.fixture
def sample_binary_dataset(random_state):
    """Provide a 200-lead scored population with both classes present."""
    n_samples = 200
    pred_prob = random_state.uniform(0, 1, n_samples)
    y_true = (random_state.uniform(0, 1, n_samples) < pred_prob).astype(int)
    y_true[0], y_true[1] = 0, 1
    return ScoredDataset.from_predictions(pred_prob, y_true)


@pytest.fixture(params=[0.01, 0.05, 0.1, 0.25, 1.0])
def grid_step(request):
    """Parametrized fixture for different grid resolutions."""
    return request.param


@pytest.fixture(params=[1, 10, 101, 1000])
def dataset_size(request):
    """Parametrized fixture for different population sizes."""
    return request.param
