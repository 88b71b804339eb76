"""Class with dataarray functions.

"dataarray" functions take :class:`xarray.DataArray` as inputs.
"""

import numpy as np
from arviz_stats.base import dataarray_stats as ess_dataarray_stats
from arviz_stats.validate import validate_dims
from xarray import DataArray, apply_ufunc

from psis_diagnostics.base.array import array_stats, warn_unadjusted_ess
from psis_diagnostics.base.stats_utils import float_dtype, uses_mcmc_source
from psis_diagnostics.exceptions import ShapeError
from psis_diagnostics.validate import validate_chain_draw_dims


class BaseDataArray:
    """Class with numpy+scipy only functions that take DataArray inputs."""

    def __init__(self, array_class=None):
        self.array_class = array_stats if array_class is None else array_class

    def relative_eff(self, da, sample_dims=None, source="default", **kwargs):
        """Compute relative efficiency on DataArray input.

        The mcmc based computation returns one value per element of the non sample dims,
        the fallback returns ones along the chain dimension.
        """
        chain_dim, draw_dim = validate_chain_draw_dims(sample_dims, da)
        if not uses_mcmc_source(source):
            ones = np.ones(da.sizes[chain_dim], dtype=float_dtype(da.dtype))
            coords = {chain_dim: da[chain_dim].values} if chain_dim in da.coords else None
            return DataArray(ones, dims=[chain_dim], coords=coords)
        return ess_dataarray_stats.ess(
            da, sample_dims=[chain_dim, draw_dim], **{**kwargs, "relative": True}
        )

    def _process_r_eff(self, da, r_eff, dims):
        """Align `r_eff` with the dimensions of `da` that are not reduced."""
        group_da = da.isel({dim: 0 for dim in dims}, drop=True)
        if r_eff is None:
            warn_unadjusted_ess()
            return DataArray(1.0)
        if not isinstance(r_eff, DataArray):
            r_eff = np.asarray(r_eff)
            if r_eff.ndim == 0:
                return DataArray(r_eff)
            if r_eff.shape != group_da.shape:
                raise ShapeError(
                    f"r_eff with shape {r_eff.shape} does not match the {group_da.shape} "
                    f"shape of weights once {dims} dimensions are reduced"
                )
            r_eff = DataArray(r_eff, dims=group_da.dims)
        for dim in r_eff.dims:
            if dim not in group_da.dims or r_eff.sizes[dim] != group_da.sizes[dim]:
                raise ShapeError(
                    f"r_eff dimension '{dim}' with length {r_eff.sizes[dim]} does not match "
                    f"the non sample dimensions of weights: {dict(group_da.sizes)}"
                )
            if (
                dim in r_eff.indexes
                and dim in group_da.indexes
                and not r_eff.indexes[dim].equals(group_da.indexes[dim])
            ):
                raise ShapeError(
                    f"r_eff coordinate values along '{dim}' do not match the ones of weights"
                )
        return r_eff.broadcast_like(group_da).transpose(*group_da.dims)

    def _apply_weights_func(self, func, da, r_eff, sample_dims, log_weights):
        dims = validate_dims(sample_dims)
        r_eff = self._process_r_eff(da, r_eff, dims)
        return apply_ufunc(
            func,
            da,
            r_eff,
            input_core_dims=[dims, []],
            output_core_dims=[[]],
            kwargs={"axis": np.arange(-len(dims), 0, 1), "log_weights": log_weights},
        )

    def psis_ess(self, da, r_eff=None, sample_dims=None, log_weights=False):
        """Compute the entropy based ess on DataArray input."""
        return self._apply_weights_func(
            self.array_class.psis_ess, da, r_eff, sample_dims, log_weights
        )

    def sup_ess(self, da, r_eff=None, sample_dims=None, log_weights=False):
        """Compute the supremum based ess on DataArray input."""
        return self._apply_weights_func(
            self.array_class.sup_ess, da, r_eff, sample_dims, log_weights
        )


dataarray_stats = BaseDataArray(array_class=array_stats)
