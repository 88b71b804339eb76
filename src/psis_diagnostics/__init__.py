# pylint: disable=wildcard-import
"""Effective sample size diagnostics for Pareto smoothed importance sampling."""

import warnings

from psis_diagnostics.exceptions import ShapeError, UnadjustedESSWarning

__version__ = "0.1.0"

warnings.filterwarnings("always", category=UnadjustedESSWarning, append=True)

try:
    from psis_diagnostics.utils import *
    from psis_diagnostics.psis import psis_ess, relative_eff, sup_ess

except ModuleNotFoundError:
    pass
