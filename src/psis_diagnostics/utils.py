"""psis_diagnostics general utility functions."""

from importlib import import_module

import xarray as xr
from arviz_base import rcParams

__all__ = ["get_function", "get_array_function"]


def _preferred_module(layer_name):
    module_name = rcParams["stats.module"]
    if isinstance(module_name, str):
        preferred_module = import_module(f"psis_diagnostics.{module_name}")
    else:
        preferred_module = module_name
    if hasattr(preferred_module, layer_name):
        preferred_module = getattr(preferred_module, layer_name)
    return preferred_module


def get_function(func_name):
    """Get a function from psis_diagnostics' dataarray layer.

    The layer comes from the ``stats.module`` rcParam. A string selects one of the
    psis_diagnostics submodules (``"base"`` or ``"numba"``), any other object is used
    as is, through its ``dataarray_stats`` attribute if it has one.

    Parameters
    ----------
    func_name : str
        Name of the function to be imported and returned

    Returns
    -------
    callable
    """
    preferred_module = _preferred_module("dataarray_stats")
    if not hasattr(preferred_module, func_name):
        raise KeyError(f"Requested function '{func_name}' is not available in '{preferred_module}'")
    return getattr(preferred_module, func_name)


def get_array_function(func_name):
    """Get a function from psis_diagnostics' array layer, see :func:`get_function`."""
    preferred_module = _preferred_module("array_stats")
    if not hasattr(preferred_module, func_name):
        raise KeyError(f"Requested function '{func_name}' is not available in '{preferred_module}'")
    return getattr(preferred_module, func_name)


def apply_function_to_dataset(func, ds, **kwargs):
    """Apply a DataArray function to every variable in `ds`.

    Keyword arguments that are Datasets themselves are subset to the matching variable.
    """
    return xr.Dataset(
        {
            var_name: func(
                da,
                **{
                    key: value[var_name] if isinstance(value, xr.Dataset) else value
                    for key, value in kwargs.items()
                },
            )
            for var_name, da in ds.items()
        }
    )
