# pylint: disable=wildcard-import
"""psis_diagnostics computational functions in numpy+numba.

Functions implemented in this folder can depend on NumPy, SciPy and Numba.
"""

from psis_diagnostics.numba.array import array_stats

try:
    from psis_diagnostics.numba.dataarray import dataarray_stats
except ModuleNotFoundError:
    pass
