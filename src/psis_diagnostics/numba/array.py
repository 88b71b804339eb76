"""Array numba functions."""

import numpy as np
from numba import guvectorize

from psis_diagnostics.base.array import BaseArray


def flatten_core_axes(ary, n_axes):
    """Flatten the last `n_axes` dimensions of `ary` into a single one."""
    return ary.reshape((*ary.shape[: ary.ndim - n_axes], -1))


@guvectorize(
    ["void(float32[:], float32, float32[:])", "void(float64[:], float64, float64[:])"],
    "(n),()->()",
    target="parallel",
    cache=True,
    nopython=True,
)
def _psis_ess_ufunc(weights, r_eff, out):
    # entropy accumulated in out to keep the precision of the weights
    out[0] = 0
    for weight in weights:
        if weight > 0:
            out[0] -= weight * np.log(weight)
    out[0] = r_eff * np.exp(out[0])


@guvectorize(
    ["void(float32[:], float32, float32[:])", "void(float64[:], float64, float64[:])"],
    "(n),()->()",
    target="parallel",
    cache=True,
    nopython=True,
)
def _sup_ess_ufunc(weights, r_eff, out):
    max_weight = np.max(weights)
    if max_weight > 0:
        out[0] = r_eff / max_weight
    else:
        out[0] = np.inf


class NumbaArray(BaseArray):
    """Class with numba accelerated/guvectorized functions that take array inputs.

    Notes
    -----
    Only the per group reductions of :meth:`psis_ess` and :meth:`sup_ess` are
    guvectorized. Log weights fall back to the numpy implementation.
    """

    def psis_ess(self, ary, r_eff=None, axis=-1, log_weights=False):
        """Compute the entropy based ess of PSIS weights with a parallel guvectorized kernel."""
        ary, r_eff, axes = self._process_weights(ary, r_eff, axis)
        if log_weights:
            return self._psis_ess(ary, r_eff, axis=axes, log_weights=True)
        return _psis_ess_ufunc(flatten_core_axes(ary, len(axes)), r_eff)

    def sup_ess(self, ary, r_eff=None, axis=-1, log_weights=False):
        """Compute the supremum based ess of PSIS weights with a parallel guvectorized kernel."""
        ary, r_eff, axes = self._process_weights(ary, r_eff, axis)
        if log_weights:
            return self._sup_ess(ary, r_eff, axis=axes, log_weights=True)
        return _sup_ess_ufunc(flatten_core_axes(ary, len(axes)), r_eff)


array_stats = NumbaArray()
