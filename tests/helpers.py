# pylint: disable=redefined-outer-name
"""Test related helper functions."""

import os
import sys
import warnings
from typing import Any

import numpy as np
import pytest


def importorskip(modname: str, reason: str | None = None) -> Any:
    """Import and return the requested module ``modname``.

    Doesn't allow skips when ``PSIS_DIAGNOSTICS_REQUIRE_ALL_DEPS`` env var is defined.
    Borrowed and modified from ``pytest.importorskip``.

    Parameters
    ----------
    modname : str
        the name of the module to import
    reason : str, optional
        this reason is shown as skip message when the module cannot be imported.
    """
    __tracebackhide__ = True  # pylint: disable=unused-variable
    compile(modname, "", "eval")  # to catch syntaxerrors

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            __import__(modname)
        except ImportError as exc:
            if "PSIS_DIAGNOSTICS_REQUIRE_ALL_DEPS" in os.environ:
                raise exc
            if reason is None:
                reason = f"could not import {modname!r}: {exc}"
            pytest.skip(reason, allow_module_level=True)

    return sys.modules[modname]


def ar1_draws(phi, shape, seed=0):
    """Simulate AR(1) draws with autocorrelation `phi` along the last axis."""
    rng = np.random.default_rng(seed)
    noise = rng.normal(size=shape)
    draws = np.empty(shape)
    draws[..., 0] = noise[..., 0]
    for i in range(1, shape[-1]):
        draws[..., i] = phi * draws[..., i - 1] + noise[..., i]
    return draws


def create_log_likelihood_model(seed=10, n_obs=6):
    """Create a DataTree with posterior and pointwise log likelihood groups."""
    from arviz_base import from_dict

    rng = np.random.default_rng(seed)
    nchains = 4
    ndraws = 200
    return from_dict(
        {
            "posterior": {"mu": rng.normal(size=(nchains, ndraws))},
            "log_likelihood": {"y": rng.normal(size=(nchains, ndraws, n_obs))},
            "observed_data": {"y": rng.normal(size=n_obs)},
        },
        dims={"y": ["obs_dim"]},
        coords={"obs_dim": np.arange(n_obs)},
    )
