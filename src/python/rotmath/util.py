"""Scalar helpers shared by the rotation types."""

import numpy as np


def clamp(value, lo, hi):
    """
    Clamp a scalar into the closed interval [lo, hi].

    Returns ``lo`` if ``value < lo``, ``hi`` if ``value > hi`` and ``value``
    otherwise. NaN is passed through unchanged, and a numpy scalar keeps its
    dtype so single-precision math stays single precision.

    Parameters
    ----------
    value : float or numpy scalar
        Value to clamp.
    lo, hi : float
        Interval bounds, ``lo <= hi``.

    Returns
    -------
    float or numpy scalar
        The clamped value.
    """
    if isinstance(value, np.generic):
        return np.clip(value, value.dtype.type(lo), value.dtype.type(hi))
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value
