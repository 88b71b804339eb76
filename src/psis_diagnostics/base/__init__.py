# pylint: disable=wildcard-import
"""psis_diagnostics computational functions in NumPy.

Functions implemented in this folder should only depend on NumPy and SciPy.
"""
from psis_diagnostics.base.array import array_stats

try:
    from psis_diagnostics.base.dataarray import dataarray_stats
except ModuleNotFoundError:
    pass
