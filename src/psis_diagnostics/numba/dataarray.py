"""Class with dataarray numbified functions."""

from psis_diagnostics.base.dataarray import BaseDataArray
from psis_diagnostics.numba.array import array_stats


class NumbaDataArray(BaseDataArray):
    """DataArray compatible functions that use numba."""


dataarray_stats = NumbaDataArray(array_class=array_stats)
