# -*- coding: utf-8 -*-
"""
Parameter checks shared by the shape samplers.

Every check runs before the sampler touches its random source, so a call
either returns a point inside the declared region or raises without
consuming draws.
"""

# geosample/validation.py
from __future__ import annotations

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Shape parameters that do not describe a valid region."""


def _reject(msg: str):
    logger.debug("rejected parameters: %s", msg)
    raise InvalidParameterError(msg)


def as_scalar(name: str, value) -> float:
    """
    Coerce a scalar extent to float.
    Non-numeric input raises TypeError, NaN/inf raise InvalidParameterError.
    """
    try:
        val = float(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be numeric, got {value!r} ({type(value)})") from e
    if not math.isfinite(val):
        _reject(f"{name} must be finite, got {val}")
    return val


def as_point(origin, dim: int) -> np.ndarray:
    """Return origin as a float array of shape (dim,)."""
    try:
        pt = np.asarray(origin, dtype=float)
    except (TypeError, ValueError) as e:
        raise TypeError(f"origin must be array-like of {dim} numbers, got {origin!r}") from e
    if pt.shape != (dim,):
        _reject(f"origin must have shape ({dim},), got {pt.shape}")
    if not np.all(np.isfinite(pt)):
        _reject(f"origin must be finite, got {pt}")
    return pt


def check_ring(r_min, r_max) -> tuple[float, float]:
    """0 <= r_min < r_max."""
    r_min = as_scalar("r_min", r_min)
    r_max = as_scalar("r_max", r_max)
    if r_min < 0.0 or r_max < 0.0:
        _reject(f"radii must be non-negative, got r_min={r_min}, r_max={r_max}")
    if r_max <= r_min:
        _reject(f"r_max must exceed r_min, got r_min={r_min}, r_max={r_max}")
    return r_min, r_max


def check_radius(radius, allow_zero: bool = False) -> float:
    radius = as_scalar("radius", radius)
    if radius < 0.0 or (radius == 0.0 and not allow_zero):
        _reject(f"radius must be {'non-negative' if allow_zero else 'positive'}, got {radius}")
    return radius


def check_height(height) -> float:
    height = as_scalar("height", height)
    if height <= 0.0:
        _reject(f"height must be positive, got {height}")
    return height


def check_torus(major_radius, minor_radius) -> tuple[float, float]:
    """major_radius > minor_radius >= 0 (no self-intersecting tube)."""
    major = as_scalar("major_radius", major_radius)
    minor = as_scalar("minor_radius", minor_radius)
    if minor < 0.0:
        _reject(f"minor_radius must be non-negative, got {minor}")
    if major <= minor:
        _reject(f"major_radius must exceed minor_radius, got R={major}, r={minor}")
    return major, minor


def check_count(n) -> int:
    """Batch size: a non-negative integer."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        _reject(f"sample count must be an integer, got {n!r}")
    if n < 0:
        _reject(f"sample count must be non-negative, got {n}")
    return int(n)
