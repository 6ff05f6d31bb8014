# -*- coding: utf-8 -*-
"""
Chi-square density checks for sample batches.

Samples are binned into cells of equal measure (equal-area rings, equal
height slabs) or cells with a known measure fraction, and the counts are
compared with scipy.stats.chisquare. A tiny p-value means the batch is
unlikely to come from the uniform density.
"""

# geosample/diagnostics.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy import stats

from .regions import equal_area_ring_edges, planar_distance
from .validation import InvalidParameterError, check_count, check_height, check_radius, check_torus


@dataclass
class UniformityReport:
    statistic: float
    pvalue: float
    counts: np.ndarray
    expected: np.ndarray
    # samples farther than atol outside the region; not binned
    outside: int = 0

    def is_uniform(self, alpha: float = 1e-3) -> bool:
        return self.outside == 0 and bool(self.pvalue >= alpha)


def _check_bins(bins) -> int:
    bins = check_count(bins)
    if bins < 2:
        raise InvalidParameterError(f"need at least 2 bins, got {bins}")
    return bins


def _bin(values: np.ndarray, edges: np.ndarray, atol: float):
    """
    Histogram values over edges. Values within atol of the outer edges are
    pulled onto them; values beyond are returned as an outside count.
    """
    lo, hi = edges[0], edges[-1]
    inside = (values >= lo - atol) & (values <= hi + atol)
    counts, _ = np.histogram(np.clip(values[inside], lo, hi), bins=edges)
    return counts, int(np.count_nonzero(~inside))


def _report(counts: np.ndarray, fractions: np.ndarray, outside: int = 0) -> UniformityReport:
    total = counts.sum()
    if total == 0:
        raise InvalidParameterError("no samples to test")
    expected = fractions / fractions.sum() * total
    res = stats.chisquare(counts, expected)
    return UniformityReport(float(res.statistic), float(res.pvalue), counts, expected, outside)


def radial_uniformity(points, origin, r_min: float, r_max: float, bins: int = 10,
                      atol: float = 1e-6) -> UniformityReport:
    """
    Counts per equal-area ring of the annulus (or of the cylinder cross-section
    for 3D points) against equal expected counts.
    """
    bins = _check_bins(bins)
    edges = equal_area_ring_edges(r_min, r_max, bins)
    counts, outside = _bin(planar_distance(points, origin), edges, atol)
    return _report(counts, np.ones(bins), outside)


def axial_uniformity(points, origin, height: float, bins: int = 10,
                     atol: float = 1e-6) -> UniformityReport:
    """Counts per equal-height slab of a cylinder centered at origin."""
    bins = _check_bins(bins)
    half = 0.5 * check_height(height)
    dy = np.asarray(points, dtype=float)[..., 1] - np.asarray(origin, dtype=float)[1]
    counts, outside = _bin(dy, np.linspace(-half, half, bins + 1), atol)
    return _report(counts, np.ones(bins), outside)


def _tube_coords(points, origin, major: float):
    off = np.asarray(points, dtype=float) - np.asarray(origin, dtype=float)
    rho = planar_distance(off, np.zeros(3))
    s = np.hypot(rho - major, off[..., 1])
    phi = np.arctan2(off[..., 1], rho - major)
    return s, phi


def tube_uniformity(points, origin, major_radius: float, minor_radius: float,
                    bins: int = 10, atol: float = 1e-6) -> UniformityReport:
    """
    Counts per equal-area ring of the tube cross-section, measured from the
    centre ring. Both torus sampling modes give a uniform-by-area radial
    profile here.
    """
    bins = _check_bins(bins)
    major, minor = check_torus(major_radius, minor_radius)
    check_radius(minor)
    s, _ = _tube_coords(points, origin, major)
    counts, outside = _bin(s, equal_area_ring_edges(0.0, minor, bins), atol)
    return _report(counts, np.ones(bins), outside)


def tube_angle_uniformity(points, origin, major_radius: float, minor_radius: float,
                          bins: int = 12, atol: float = 1e-6) -> UniformityReport:
    """
    Counts per cross-section angle sector against the volume-uniform
    expectation. A sector [a, b] of the tube holds the fraction
        ((b - a)/2 + r/(3R) * (sin b - sin a)) / pi
    of the torus volume, so the outer sectors (phi near 0) hold more.
    The area-uniform cross-section sampler fails this check for thick tubes.
    """
    bins = _check_bins(bins)
    major, minor = check_torus(major_radius, minor_radius)
    check_radius(minor)
    s, phi = _tube_coords(points, origin, major)
    inside = s <= minor + atol
    edges = np.linspace(-np.pi, np.pi, bins + 1)
    counts, _ = np.histogram(phi[inside], bins=edges)
    a, b = edges[:-1], edges[1:]
    fractions = ((b - a) / 2.0 + minor / (3.0 * major) * (np.sin(b) - np.sin(a))) / np.pi
    return _report(counts, fractions, int(np.count_nonzero(~inside)))
