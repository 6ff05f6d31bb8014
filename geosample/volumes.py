# -*- coding: utf-8 -*-
"""
Uniform sampling of solid regions: annular (hollow) cylinder and torus.

Convention: the second component is the height axis ("up"). The cylinder
axis and the torus symmetry axis both run through the origin along it.
"""

# geosample/volumes.py
from __future__ import annotations

import logging

import numpy as np

from .geometry import annulus_radius, disk_radius, lerp, uniform_angle
from .validation import as_point, check_count, check_height, check_ring, check_torus

logger = logging.getLogger(__name__)


def _ring_to_xyz(rho, theta, y) -> np.ndarray:
    """Horizontal distance rho at angle theta, height y -> (x, y, z)."""
    return np.stack([rho * np.cos(theta), y, rho * np.sin(theta)], axis=-1)


def sample_annular_cylinder(origin, r_min: float, r_max: float, height: float, rng) -> np.ndarray:
    """
    Sample a point uniformly by volume in a hollow cylinder centered at origin.
    The cross-section is the annulus r_min..r_max, the height is split evenly
    above and below the origin:
        theta = 2*pi*U1
        r     = sqrt(U2 * (r_max^2 - r_min^2) + r_min^2)
        y     = lerp(-h/2, h/2, U3)
    dV = dA * dy, so the axial draw needs no transform.
    Consumes exactly three draws. Returns: (3,) vector (x, y, z).
    """
    origin = as_point(origin, 3)
    r_min, r_max = check_ring(r_min, r_max)
    height = check_height(height)

    theta = uniform_angle(float(rng.random()))
    r = annulus_radius(float(rng.random()), r_min, r_max)
    half = 0.5 * height
    y = lerp(-half, half, float(rng.random()))
    return origin + _ring_to_xyz(r, theta, y)


def _exact_tube_point(major: float, minor: float, rng) -> tuple[float, float]:
    # accept with probability (R + r cos(phi)) / (R + minor), >= (R - minor)/(R + minor) > 0
    bound = major + minor
    while True:
        phi = uniform_angle(float(rng.random()))
        r = disk_radius(float(rng.random()), minor)
        if float(rng.random()) * bound < major + r * np.cos(phi):
            return phi, r


def sample_torus(origin, major_radius: float, minor_radius: float, rng,
                 exact: bool = False) -> np.ndarray:
    """
    Sample a point in the solid torus around the height axis through origin.
        theta = 2*pi*U1            (position around the ring)
        phi   = 2*pi*U2            (angle in the tube cross-section)
        r     = minor*sqrt(U3)     (uniform by area in the cross-section)
        x = (R + r cos(phi)) cos(theta),  y = r sin(phi),  z = (R + r cos(phi)) sin(theta)

    The default mode draws the cross-section uniformly by area and ignores the
    (R + r cos(phi)) volume factor, so the outer half of the tube is slightly
    under-sampled. Three draws per call.

    exact=True rejects cross-section samples with probability
    1 - (R + r cos(phi)) / (R + minor), which makes the density uniform by
    volume. The number of draws is then variable (1 + 3 per attempt).
    Returns: (3,) vector (x, y, z).
    """
    origin = as_point(origin, 3)
    major, minor = check_torus(major_radius, minor_radius)

    theta = uniform_angle(float(rng.random()))
    if exact:
        phi, r = _exact_tube_point(major, minor, rng)
    else:
        phi = uniform_angle(float(rng.random()))
        r = disk_radius(float(rng.random()), minor)

    rho = major + r * np.cos(phi)
    return origin + _ring_to_xyz(rho, theta, r * np.sin(phi))


def sample_annular_cylinder_batch(origin, r_min: float, r_max: float, height: float, n: int,
                                  rng: np.random.Generator, dtype=None) -> np.ndarray:
    """
    Vectorised sample_annular_cylinder.
    Returns: (n, 3) array, cast to dtype when given.
    """
    origin = as_point(origin, 3)
    r_min, r_max = check_ring(r_min, r_max)
    height = check_height(height)
    n = check_count(n)

    u = rng.random((n, 3))
    theta = uniform_angle(u[:, 0])
    r = annulus_radius(u[:, 1], r_min, r_max)
    y = lerp(-0.5 * height, 0.5 * height, u[:, 2])
    pts = origin + _ring_to_xyz(r, theta, y)
    return pts if dtype is None else pts.astype(dtype)


def _exact_tube_batch(n: int, major: float, minor: float, rng: np.random.Generator):
    phi = np.empty(n)
    r = np.empty(n)
    filled = 0
    attempts = 0
    while filled < n:
        m = n - filled
        u = rng.random((m, 3))
        phi_c = uniform_angle(u[:, 0])
        r_c = disk_radius(u[:, 1], minor)
        keep = u[:, 2] * (major + minor) < major + r_c * np.cos(phi_c)
        k = int(keep.sum())
        phi[filled:filled + k] = phi_c[keep]
        r[filled:filled + k] = r_c[keep]
        filled += k
        attempts += m
    if n:
        logger.debug("exact torus: %d accepted of %d attempts (%.3f)", n, attempts, n / attempts)
    return phi, r


def sample_torus_batch(origin, major_radius: float, minor_radius: float, n: int,
                       rng: np.random.Generator, exact: bool = False, dtype=None) -> np.ndarray:
    """
    Vectorised sample_torus.
    Returns: (n, 3) array, cast to dtype when given.
    """
    origin = as_point(origin, 3)
    major, minor = check_torus(major_radius, minor_radius)
    n = check_count(n)

    if exact:
        theta = uniform_angle(rng.random(n))
        phi, r = _exact_tube_batch(n, major, minor, rng)
    else:
        u = rng.random((n, 3))
        theta = uniform_angle(u[:, 0])
        phi = uniform_angle(u[:, 1])
        r = disk_radius(u[:, 2], minor)

    rho = major + r * np.cos(phi)
    pts = origin + _ring_to_xyz(rho, theta, r * np.sin(phi))
    return pts if dtype is None else pts.astype(dtype)
