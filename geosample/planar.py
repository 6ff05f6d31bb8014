# -*- coding: utf-8 -*-
"""
Uniform sampling of planar regions: annulus, disk and circle edge.
"""

# geosample/planar.py
from __future__ import annotations

import numpy as np

from .geometry import (
    annulus_radius, disk_radius, polar_offset, uniform_angle,
    uniform_point_in_disk, uniform_point_on_circle,
)
from .validation import as_point, check_count, check_radius, check_ring


def sample_annulus(origin, r_min: float, r_max: float, rng) -> np.ndarray:
    """
    Sample a point uniformly by area in the ring r_min <= |p - origin| <= r_max.
        theta = 2*pi*U1
        r     = sqrt(U2 * (r_max^2 - r_min^2) + r_min^2)
    Consumes exactly two draws from rng. r_min = 0 gives a disk sample.
    Returns: (2,) vector (x, y).
    """
    origin = as_point(origin, 2)
    r_min, r_max = check_ring(r_min, r_max)

    theta = uniform_angle(float(rng.random()))
    r = annulus_radius(float(rng.random()), r_min, r_max)
    return origin + polar_offset(r, theta)


def sample_disk(origin, radius: float, rng) -> np.ndarray:
    """
    Sample a point uniformly by area in a disk. Two draws.
    Returns: (2,) vector (x, y).
    """
    origin = as_point(origin, 2)
    radius = check_radius(radius)
    return origin + uniform_point_in_disk(radius, rng)


def sample_circle(origin, radius: float, rng) -> np.ndarray:
    """
    Sample a point uniformly on the circle edge. One draw.
    A zero radius returns the origin.
    """
    origin = as_point(origin, 2)
    radius = check_radius(radius, allow_zero=True)
    return origin + uniform_point_on_circle(radius, rng)


def sample_annulus_batch(origin, r_min: float, r_max: float, n: int,
                         rng: np.random.Generator, dtype=None) -> np.ndarray:
    """
    Vectorised sample_annulus.
    Returns: (n, 2) array, cast to dtype when given (e.g. np.float32).
    """
    origin = as_point(origin, 2)
    r_min, r_max = check_ring(r_min, r_max)
    n = check_count(n)

    u = rng.random((n, 2))
    theta = uniform_angle(u[:, 0])
    r = annulus_radius(u[:, 1], r_min, r_max)
    pts = origin + polar_offset(r, theta)
    return pts if dtype is None else pts.astype(dtype)


def sample_disk_batch(origin, radius: float, n: int,
                      rng: np.random.Generator, dtype=None) -> np.ndarray:
    """Vectorised sample_disk. Returns: (n, 2) array."""
    origin = as_point(origin, 2)
    radius = check_radius(radius)
    n = check_count(n)

    u = rng.random((n, 2))
    pts = origin + polar_offset(disk_radius(u[:, 1], radius), uniform_angle(u[:, 0]))
    return pts if dtype is None else pts.astype(dtype)
