"""Effective sample size kernels for importance weights."""

import numpy as np
from scipy.special import logsumexp


class _WeightsBase:
    """Class with numpy+scipy only functions reducing importance weights over draws."""

    @staticmethod
    def _xlogx(ary):
        """Compute ``x * log(x)`` elementwise with the convention ``0 * log(0) = 0``."""
        ary = np.asarray(ary)
        out = np.zeros_like(ary)
        positive = ary > 0
        out[positive] = ary[positive] * np.log(ary[positive])
        return out

    @staticmethod
    def _normalize_log_weights(ary, axis):
        """Self-normalize log weights over `axis` so their exponentials add up to one.

        Groups where all log weights are ``-inf`` stay at ``-inf``, like a group of
        zero weights does on the natural scale.
        """
        lse = logsumexp(ary, axis=axis, keepdims=True)
        with np.errstate(invalid="ignore"):
            return np.where(np.isneginf(lse), -np.inf, ary - lse)

    def _psis_ess(self, ary, r_eff, axis=-1, log_weights=False):
        """Compute the entropy based ess of importance weights.

        Parameters
        ----------
        ary : np.ndarray
            Normalized weights (or log weights) with the draw dimensions in `axis`.
        r_eff : np.ndarray or float
            Relative efficiency, broadcastable against the reduced shape of `ary`.
        axis : int or tuple of int
        log_weights : bool, default False

        Returns
        -------
        np.ndarray
            ``r_eff * exp(H)`` with ``H`` the Shannon entropy of the weights in nats.
        """
        if log_weights:
            ary = self._normalize_log_weights(ary, axis)
            with np.errstate(invalid="ignore"):
                terms = np.where(np.isneginf(ary), 0, np.exp(ary) * ary)
            entropy = -np.sum(terms, axis=axis)
        else:
            entropy = -np.sum(self._xlogx(ary), axis=axis)
        return r_eff * np.exp(entropy)

    def _sup_ess(self, ary, r_eff, axis=-1, log_weights=False):
        """Compute the supremum based ess, the inverse of the largest weight times `r_eff`."""
        if log_weights:
            ary = self._normalize_log_weights(ary, axis)
            with np.errstate(over="ignore"):
                return r_eff * np.exp(-np.max(ary, axis=axis))
        with np.errstate(divide="ignore"):
            return r_eff * np.reciprocal(np.max(ary, axis=axis))
