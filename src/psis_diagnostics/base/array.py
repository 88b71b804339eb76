"""Class with array functions.

"array" functions work on any dimension array,
batching as necessary.
"""

import logging
import os
import warnings

import numpy as np
from arviz_stats.base import array_stats as ess_array_stats

from psis_diagnostics.base.stats_utils import float_dtype, uses_mcmc_source
from psis_diagnostics.base.weights import _WeightsBase
from psis_diagnostics.exceptions import ShapeError, UnadjustedESSWarning

_log = logging.getLogger(__name__)

UNADJUSTED_ESS_MESSAGE = (
    "PSIS ESS not adjusted based on MCMC ESS. MCSE and ESS estimates "
    "will be overoptimistic if samples are autocorrelated."
)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def process_ary_axes(ary, axes):
    """Process input array and axes to ensure input core dims are the last ones.

    Parameters
    ----------
    ary : array_like
    axes : int or sequence of int
    """
    if axes is None:
        axes = list(range(ary.ndim))
    if isinstance(axes, int | np.integer):
        axes = [axes]
    axes = [ax if ax >= 0 else ary.ndim + ax for ax in axes]
    reordered_axes = [i for i in range(ary.ndim) if i not in axes] + list(axes)
    ary = np.transpose(ary, axes=reordered_axes)
    return ary, np.arange(-len(axes), 0, dtype=int)


def warn_unadjusted_ess():
    """Warn that the ess is not corrected with the relative efficiency of the MCMC draws.

    The warning is attributed to the first frame outside psis_diagnostics,
    whichever layer it is raised from.
    """
    warnings.warn(
        UNADJUSTED_ESS_MESSAGE,
        UnadjustedESSWarning,
        stacklevel=2,
        skip_file_prefixes=(_PACKAGE_DIR,),
    )


class BaseArray(_WeightsBase):
    """Class with numpy+scipy only functions that take array inputs.

    Notes
    -----
    If a new dimension is created by the function it must be added at the end of the array.
    Otherwise the functions won't be compatible with :func:`xarray.apply_ufunc`.
    """

    def relative_eff(self, ary, source="default", chain_axis=-1, draw_axis=-2, **kwargs):
        """Compute the relative efficiency of MCMC draws, their ess divided by their size.

        See docstring of :func:`psis_diagnostics.relative_eff` for full description
        of computation and arguments.

        Parameters
        ----------
        ary : array-like
            Array with shape ``(parameters, draws, chains)`` for the default axes.
        source : str, default "default"
        chain_axis : int, default -1
        draw_axis : int, default -2
        **kwargs
            Passed to the array ``ess`` of :mod:`arviz_stats`, e.g. ``method`` or ``prob``.
            ``relative`` is always set to True.

        Returns
        -------
        ndarray
            One relative ess per parameter when `source` is "default" or "mcmc",
            otherwise an array of ones with one element per chain.
        """
        ary = np.asarray(ary)
        if ary.ndim != 3:
            raise ShapeError(
                "relative_eff requires a 3D (parameter, draw, chain) array, "
                f"got an array with shape {ary.shape}"
            )
        if not uses_mcmc_source(source):
            _log.debug("Source %r is not MCMC, draws are treated as independent", source)
            return np.ones(ary.shape[chain_axis], dtype=float_dtype(ary.dtype))
        return ess_array_stats.ess(
            ary, chain_axis=chain_axis, draw_axis=draw_axis, **{**kwargs, "relative": True}
        )

    def _process_weights(self, ary, r_eff, axis):
        """Move draw axes to the end and check `r_eff` matches the remaining shape."""
        ary = np.asarray(ary)
        ary = ary.astype(float_dtype(ary.dtype), copy=False)
        ary, axes = process_ary_axes(ary, axis)
        group_shape = ary.shape[: -len(axes)]
        if r_eff is None:
            warn_unadjusted_ess()
            r_eff = np.ones(group_shape, dtype=ary.dtype)
        r_eff = np.asarray(r_eff, dtype=ary.dtype)
        if r_eff.ndim != 0 and r_eff.shape != group_shape:
            raise ShapeError(
                f"r_eff with shape {r_eff.shape} does not match the {group_shape} "
                "shape of weights once draw dimensions are reduced"
            )
        return ary, r_eff, tuple(axes)

    def psis_ess(self, ary, r_eff=None, axis=-1, log_weights=False):
        """Compute the entropy based ess of PSIS weights.

        See docstring of :func:`psis_diagnostics.psis_ess` for full description
        of computation and arguments.

        Parameters
        ----------
        ary : array-like
            Normalized importance weights, or log weights if `log_weights` is True.
        r_eff : array-like or float, optional
            Shape of `ary` minus dimensions indicated in `axis`. Warns if omitted.
        axis : int, sequence of int or None, default -1
        log_weights : bool, default False
        """
        ary, r_eff, axes = self._process_weights(ary, r_eff, axis)
        return self._psis_ess(ary, r_eff, axis=axes, log_weights=log_weights)

    def sup_ess(self, ary, r_eff=None, axis=-1, log_weights=False):
        """Compute the supremum based ess of PSIS weights.

        See docstring of :func:`psis_diagnostics.sup_ess` for full description
        of computation and arguments.
        """
        ary, r_eff, axes = self._process_weights(ary, r_eff, axis)
        return self._sup_ess(ary, r_eff, axis=axes, log_weights=log_weights)


array_stats = BaseArray()
