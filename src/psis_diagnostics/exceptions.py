"""Exceptions and warnings raised by psis_diagnostics."""

__all__ = ["ShapeError", "UnadjustedESSWarning"]


class ShapeError(ValueError):
    """Input array rank or paired array shapes are not compatible."""


class UnadjustedESSWarning(UserWarning):
    """PSIS effective sample size computed without a relative efficiency correction."""
