# -*- coding: utf-8 -*-
"""
Component-wise helpers for small vectors of any length and dtype.

Integer vectors keep their dtype. Every helper returns a new array and
leaves its input untouched.
"""

# geosample/vector_ops.py
from __future__ import annotations

import numpy as np

_AXES = ("x", "y", "z")


def _vec(vec) -> np.ndarray:
    return np.array(vec, copy=True)


def invert(vec) -> np.ndarray:
    """
    1 / v per component; zero components stay zero.
    For integer vectors the division truncates, so only +-1 survive.
    """
    v = _vec(vec)
    if np.issubdtype(v.dtype, np.integer):
        return np.where(np.abs(v) == 1, v, 0).astype(v.dtype)
    v = v.astype(float)
    out = np.zeros_like(v)
    np.divide(1.0, v, out=out, where=v != 0)
    return out


def absolute(vec) -> np.ndarray:
    return np.abs(_vec(vec))


def sign(vec) -> np.ndarray:
    """-1, 0 or 1 per component."""
    v = _vec(vec)
    return np.sign(v).astype(v.dtype)


def divide(vec, divisor) -> np.ndarray:
    """vec * invert(divisor): division by a zero component gives zero."""
    return _vec(vec) * invert(divisor)


def add(vec, x=0, y=0, z=0) -> np.ndarray:
    """
    Add offsets to the x / y / z components present in vec.
    Offsets must fit the dtype (integers for integer vectors), otherwise
    TypeError is raised.
    """
    v = _vec(vec)
    for i, d in enumerate((x, y, z)[:v.shape[-1]]):
        if not np.can_cast(np.asarray(d).dtype, v.dtype, casting="same_kind"):
            raise TypeError(f"offset {d!r} does not fit a vector of dtype {v.dtype}")
        v[..., i] += d
    return v


def with_components(vec, x=None, y=None, z=None) -> np.ndarray:
    """Copy of vec with the given components replaced."""
    v = _vec(vec)
    vals = dict(zip(_AXES, (x, y, z)))
    for i, axis in enumerate(_AXES[:v.shape[-1]]):
        if vals[axis] is not None:
            v[..., i] = vals[axis]
    return v


def in_range_of(current, target, range_) -> bool:
    """True when |current - target| <= range_ (compared squared)."""
    diff = np.asarray(current) - np.asarray(target)
    return bool(np.dot(diff, diff) <= range_ * range_)
