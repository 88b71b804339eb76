"""Validator functions for common arguments."""

from arviz_stats.validate import validate_dims

from psis_diagnostics.exceptions import ShapeError


def validate_chain_draw_dims(dims, da):
    """Validate `dims` contains exactly a chain and a draw dimension present in `da`.

    Returns
    -------
    str
        Chain dimension name
    str
        Draw dimension name
    """
    dims = validate_dims(dims)
    if len(dims) != 2:
        raise ShapeError(
            f"Both a chain and a draw dimension are required, but sample dims are {dims}"
        )
    missing_dims = [dim for dim in dims if dim not in da.dims]
    if missing_dims:
        raise ShapeError(f"Sample dims {missing_dims} not found in dimensions {list(da.dims)}")
    chain_dim, draw_dim = dims
    return chain_dim, draw_dim
