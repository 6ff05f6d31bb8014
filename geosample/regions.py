# -*- coding: utf-8 -*-
"""
Measures of the sampled shapes and containment predicates for sample batches.
"""

# geosample/regions.py
from __future__ import annotations

import math

import numpy as np

from .validation import InvalidParameterError, check_count, check_height, check_ring, check_torus


def annulus_area(r_min: float, r_max: float) -> float:
    """pi * (r_max^2 - r_min^2)."""
    r_min, r_max = check_ring(r_min, r_max)
    return math.pi * (r_max ** 2 - r_min ** 2)


def annular_cylinder_volume(r_min: float, r_max: float, height: float) -> float:
    return annulus_area(r_min, r_max) * check_height(height)


def torus_volume(R: float, r: float) -> float:
    """Volume of a solid torus: (pi r^2) * (2 pi R)."""
    R, r = check_torus(R, r)
    return 2.0 * math.pi ** 2 * R * r ** 2


def planar_distance(points, origin) -> np.ndarray:
    """
    Distance of each point to the axis through origin.
    2D points: plain distance to origin.
    3D points: distance to the vertical (y) axis, i.e. the (x, z) components.
    """
    pts = np.asarray(points, dtype=float)
    off = pts - np.asarray(origin, dtype=float)
    if off.shape[-1] == 3:
        off = off[..., [0, 2]]
    return np.linalg.norm(off, axis=-1)


def tube_distance(points, origin, R: float) -> np.ndarray:
    """Distance of each 3D point to the torus centre ring of radius R."""
    pts = np.asarray(points, dtype=float)
    off = pts - np.asarray(origin, dtype=float)
    rho = np.linalg.norm(off[..., [0, 2]], axis=-1)
    return np.hypot(rho - R, off[..., 1])


def in_annulus(points, origin, r_min: float, r_max: float, atol: float = 1e-6) -> np.ndarray:
    d = planar_distance(points, origin)
    return (d >= r_min - atol) & (d <= r_max + atol)


def in_annular_cylinder(points, origin, r_min: float, r_max: float, height: float,
                        atol: float = 1e-6) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    dy = np.abs(pts[..., 1] - np.asarray(origin, dtype=float)[1])
    return in_annulus(pts, origin, r_min, r_max, atol) & (dy <= 0.5 * height + atol)


def in_torus(points, origin, R: float, r: float, atol: float = 1e-6) -> np.ndarray:
    return tube_distance(points, origin, R) <= r + atol


def equal_area_ring_edges(r_min: float, r_max: float, bins: int) -> np.ndarray:
    """
    Radii splitting the ring r_min..r_max into `bins` sub-rings of equal area.
    Returns: (bins + 1,) increasing array from r_min to r_max.
    """
    r_min, r_max = check_ring(r_min, r_max)
    bins = check_count(bins)
    if bins < 1:
        raise InvalidParameterError(f"bins must be at least 1, got {bins}")
    return np.sqrt(np.linspace(r_min ** 2, r_max ** 2, bins + 1))
