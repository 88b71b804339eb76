"""Effective sample size diagnostics for Pareto smoothed importance sampling."""

import numpy as np
import xarray as xr
from arviz_base import convert_to_datatree
from arviz_stats.utils import get_log_likelihood

from psis_diagnostics.base.array import warn_unadjusted_ess
from psis_diagnostics.utils import apply_function_to_dataset, get_array_function, get_function

__all__ = ["relative_eff", "psis_ess", "sup_ess"]


def relative_eff(
    data,
    source="default",
    sample_dims=None,
    var_name=None,
    chain_axis=-1,
    draw_axis=-2,
    **kwargs,
):
    r"""Compute the relative efficiency of MCMC draws.

    The relative efficiency is the effective sample size divided by the nominal sample size.
    It is the correction applied by :func:`psis_ess` and :func:`sup_ess` to account for
    the autocorrelation of the draws the importance weights were derived from.

    Parameters
    ----------
    data : array-like, DataArray, Dataset, DataTree or idata-like
        Input data, usually pointwise log likelihood values.

        - array-like: 3D array with shape ``(parameters, draws, chains)``
          for the default `chain_axis` and `draw_axis`.
        - DataArray: must contain both `sample_dims`, all other dims are parameters.
        - Dataset: computed for each variable.
        - others: converted with :func:`arviz_base.convert_to_datatree` and the
          log likelihood group is used.

    source : str, default "default"
        Case insensitive. If ``"default"`` or ``"mcmc"`` the relative ess is estimated
        with :func:`arviz_stats.ess`. Any other value returns ones, one per chain,
        meaning draws are considered independent.
    sample_dims : iterable of hashable, optional
        Chain and draw dimensions, in this order. Default ``rcParams["data.sample_dims"]``.
    var_name : str, optional
        Log likelihood variable to use when `data` holds several of them.
    chain_axis, draw_axis : int, optional
        Only used for array-like input.
    **kwargs
        Forwarded to the ``ess`` of :mod:`arviz_stats`, e.g. ``method`` or ``prob``.
        ``relative`` is always True.

    Returns
    -------
    ndarray, DataArray or Dataset

    Raises
    ------
    ShapeError
        If array-like `data` is not 3D or `sample_dims` are not two dimensions of `data`.

    Examples
    --------
    Compute the relative efficiency of pointwise log likelihood values for 10 observations
    with 4 chains of 500 draws:

    .. ipython::

        In [1]: import numpy as np
           ...: from psis_diagnostics import relative_eff
           ...: log_lik = np.random.default_rng(0).normal(size=(10, 500, 4))
           ...: relative_eff(log_lik)

    Skip the estimation, assuming independent draws:

    .. ipython::

        In [1]: relative_eff(log_lik, source="other")
    """
    if isinstance(data, list | tuple | np.ndarray):
        return get_array_function("relative_eff")(
            np.array(data), source=source, chain_axis=chain_axis, draw_axis=draw_axis, **kwargs
        )

    if isinstance(data, xr.Dataset):
        return apply_function_to_dataset(
            get_function("relative_eff"), data, sample_dims=sample_dims, source=source, **kwargs
        )

    if not isinstance(data, xr.DataArray):
        if not isinstance(data, xr.DataTree):
            data = convert_to_datatree(data)
        data = get_log_likelihood(data, var_name=var_name)

    return get_function("relative_eff")(data, sample_dims=sample_dims, source=source, **kwargs)


def _weights_dispatch(func_name, weights, r_eff, sample_dims, axis, log_weights):
    if isinstance(weights, list | tuple | np.ndarray):
        return get_array_function(func_name)(
            np.array(weights), r_eff=r_eff, axis=axis, log_weights=log_weights
        )

    if isinstance(weights, xr.DataArray):
        return get_function(func_name)(
            weights, r_eff=r_eff, sample_dims=sample_dims, log_weights=log_weights
        )

    if isinstance(weights, xr.Dataset):
        if r_eff is None:
            warn_unadjusted_ess()
            r_eff = 1.0
        return apply_function_to_dataset(
            get_function(func_name),
            weights,
            r_eff=r_eff,
            sample_dims=sample_dims,
            log_weights=log_weights,
        )

    raise TypeError(
        f"{func_name} expects array-like, DataArray or Dataset weights, got {type(weights)}"
    )


def psis_ess(weights, r_eff=None, sample_dims=None, axis=-1, log_weights=False):
    r"""Compute the entropy based effective sample size of PSIS weights.

    Approximate effective sample size of a PSIS sample with the correction in [1]_.
    It uses the exponential of the Shannon entropy of the normalized weights,

    .. math::

        \text{ESS} = r_{\text{eff}} \exp\left(-\sum_{s=1}^S w_s \log w_s\right),

    with the convention :math:`0 \log 0 = 0`. Uniform weights over :math:`S` draws give
    :math:`S \cdot r_{\text{eff}}`, a single draw with all the weight gives
    :math:`r_{\text{eff}}`.

    Parameters
    ----------
    weights : array-like, DataArray or Dataset
        Normalized importance sampling weights derived from PSIS. Weights are not checked
        to be normalized.
    r_eff : array-like, float, DataArray or Dataset, optional
        Relative efficiency of the MCMC draws the weights were derived from, one value
        per group, see :func:`relative_eff`. If omitted, a
        :class:`~psis_diagnostics.UnadjustedESSWarning` is emitted and ones are used.
    sample_dims : iterable of hashable, optional
        Draw dimensions of DataArray and Dataset `weights`.
        Default ``rcParams["data.sample_dims"]``.
    axis : int or sequence of int, default -1
        Draw axes of array-like `weights`, all other axes index groups.
    log_weights : bool, default False
        Whether `weights` are log weights. Log weights are self-normalized and the
        entropy is computed in the log domain.

    Returns
    -------
    ndarray, DataArray or Dataset
        Effective sample size for each group, in the floating point precision of `weights`.

    Raises
    ------
    ShapeError
        If `r_eff` does not match the shape of `weights` once draw dimensions are reduced.

    References
    ----------
    .. [1] Vehtari et al. *Pareto Smoothed Importance Sampling*.
        (2019) https://arxiv.org/abs/1507.02646

    Examples
    --------
    .. ipython::

        In [1]: from psis_diagnostics import psis_ess
           ...: psis_ess([[0.5, 0.5], [0.9, 0.1]], r_eff=[1.0, 0.8])
    """
    return _weights_dispatch("psis_ess", weights, r_eff, sample_dims, axis, log_weights)


def sup_ess(weights, r_eff=None, sample_dims=None, axis=-1, log_weights=False):
    r"""Compute the supremum based effective sample size of PSIS weights.

    The inverse of the largest normalized weight times the relative efficiency.
    It uses the :math:`L_\infty` norm, so it is more sensitive than :func:`psis_ess`
    but also much more variable. Groups whose largest weight is zero get an infinite ess.

    Parameters
    ----------
    weights : array-like, DataArray or Dataset
        Normalized importance sampling weights derived from PSIS.
    r_eff : array-like, float, DataArray or Dataset, optional
        Relative efficiency, see :func:`relative_eff`. Warns and uses ones if omitted.
    sample_dims : iterable of hashable, optional
    axis : int or sequence of int, default -1
    log_weights : bool, default False

    Returns
    -------
    ndarray, DataArray or Dataset

    See Also
    --------
    psis_ess : Entropy based effective sample size.
    """
    return _weights_dispatch("sup_ess", weights, r_eff, sample_dims, axis, log_weights)
