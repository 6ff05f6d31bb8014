# -*- coding: utf-8 -*-
"""
Angle and radius transforms shared by the shape samplers.

All transforms map uniform draws on [0, 1) to polar coordinates and work
element-wise on numpy arrays as well as on plain floats.
"""

# geosample/geometry.py
from __future__ import annotations

import numpy as np

TWO_PI = 2.0 * np.pi


def uniform_angle(u):
    """theta = 2*pi*U, uniform on [0, 2*pi)."""
    return TWO_PI * u


def annulus_radius(u, r_min: float, r_max: float):
    """
    Inverse CDF of the radius of a point uniform by area in a ring:
        r = sqrt(U * (r_max^2 - r_min^2) + r_min^2)
    The area element is r dr dtheta, so the radius CDF is quadratic in r.
    """
    lo = r_min * r_min
    hi = r_max * r_max
    return np.sqrt(u * (hi - lo) + lo)


def disk_radius(u, radius: float):
    """r = R*sqrt(U), the annulus radius with r_min = 0."""
    return np.sqrt(u) * radius


def lerp(a, b, t):
    return a + (b - a) * t


def polar_offset(r, theta) -> np.ndarray:
    """
    (r cos(theta), r sin(theta)).
    Returns (2,) for scalars, (n, 2) for arrays of length n.
    """
    return np.stack([r * np.cos(theta), r * np.sin(theta)], axis=-1)


def uniform_point_in_disk(radius: float, rng) -> np.ndarray:
    """
    Sample a single point uniformly in a disk of given radius centered at (0,0).
    Uses inverse transform: theta = 2*pi*U, r = R*sqrt(V).
    Returns: (2,) vector (x, y).
    """
    theta = uniform_angle(float(rng.random()))
    r = disk_radius(float(rng.random()), radius)
    return polar_offset(r, theta)


def uniform_point_on_circle(radius: float, rng) -> np.ndarray:
    """
    Sample a single point uniformly on the circle of given radius centered at (0,0).
    Returns: (2,) vector (x, y).
    """
    theta = uniform_angle(float(rng.random()))
    return polar_offset(radius, theta)
