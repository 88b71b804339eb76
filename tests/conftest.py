# pylint: disable=redefined-outer-name
import numpy as np
import pytest

from .helpers import ar1_draws, importorskip


@pytest.fixture(scope="session")
def log_lik_ary():
    """Pointwise log likelihood with shape (observation, draw, chain)."""
    return np.random.default_rng(3).normal(size=(5, 400, 4))


@pytest.fixture(scope="session")
def autocorrelated_ary():
    """AR(1) draws with shape (parameter, draw, chain)."""
    return np.moveaxis(ar1_draws(0.9, (3, 4, 1000), seed=7), 1, -1)


@pytest.fixture(scope="session")
def weights_ary():
    """Normalized heavy tailed weights with shape (observation, draw)."""
    rng = np.random.default_rng(5)
    raw = rng.pareto(2, size=(5, 1600))
    return raw / raw.sum(axis=-1, keepdims=True)


@pytest.fixture(scope="session")
def log_lik_model():
    """DataTree with a pointwise log likelihood group."""
    importorskip("arviz_base")
    from .helpers import create_log_likelihood_model

    return create_log_likelihood_model()
