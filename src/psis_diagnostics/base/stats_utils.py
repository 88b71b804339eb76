"""Stats-utility functions for psis_diagnostics."""

import numpy as np

__all__ = ["uses_mcmc_source", "float_dtype"]

MCMC_SOURCES = ("mcmc", "default")


def uses_mcmc_source(source):
    """Check if `source` asks for relative efficiency computed from the MCMC draws.

    Parameters
    ----------
    source : str or object convertible to str
        Compared case insensitively against ``"mcmc"`` and ``"default"``.

    Returns
    -------
    bool
    """
    return str(source).lower() in MCMC_SOURCES


def float_dtype(dtype):
    """Floating point dtype resulting from dividing values of `dtype`."""
    return np.result_type(dtype, 1.0)
