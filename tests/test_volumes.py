import math

import numpy as np
import pytest

from geosample.volumes import (
    sample_annular_cylinder, sample_annular_cylinder_batch, sample_torus, sample_torus_batch,
)
from geosample.regions import planar_distance, tube_distance, in_torus
from geosample.validation import InvalidParameterError
from geosample.diagnostics import (
    axial_uniformity, radial_uniformity, tube_angle_uniformity, tube_uniformity,
)


class TestAnnularCylinder:

    def test_formula_with_scripted_draws(self, scripted):
        src = scripted([0.0, 1.0, 0.75])
        p = sample_annular_cylinder((1.0, 2.0, 3.0), 1.0, 2.0, 4.0, src)
        # theta = 0 -> +x; U2 = 1 -> outer wall; U3 = 0.75 -> y = +1
        np.testing.assert_allclose(p, [3.0, 3.0, 3.0], atol=1e-12)
        assert src.calls == 3

    def test_height_is_second_axis(self, scripted):
        p = sample_annular_cylinder((0.0, 0.0, 0.0), 1.0, 2.0, 2.0, scripted([0.25, 0.0, 0.0]))
        # theta = pi/2 -> +z at the inner wall, bottom cap
        np.testing.assert_allclose(p, [0.0, -1.0, 1.0], atol=1e-12)

    def test_points_within_bounds(self, rng):
        origin = np.array([0.0, 5.0, -2.0])
        pts = np.array([sample_annular_cylinder(origin, 1.0, 2.5, 3.0, rng) for _ in range(10000)])
        d = planar_distance(pts, origin)
        assert d.min() >= 1.0 - 1e-9 and d.max() <= 2.5 + 1e-9
        assert np.abs(pts[:, 1] - origin[1]).max() <= 1.5 + 1e-9

    def test_three_draws_per_call(self, counting):
        for _ in range(10):
            sample_annular_cylinder((0, 0, 0), 0.0, 1.0, 1.0, counting)
        assert counting.calls == 30

    def test_reproducible(self):
        a = sample_annular_cylinder((0, 0, 0), 1.0, 2.0, 1.0, np.random.default_rng(3))
        b = sample_annular_cylinder((0, 0, 0), 1.0, 2.0, 1.0, np.random.default_rng(3))
        np.testing.assert_array_equal(a, b)

    @pytest.mark.parametrize("r_min, r_max, height", [
        (2.0, 1.0, 1.0),
        (1.0, 1.0, 1.0),
        (-0.5, 1.0, 1.0),
        (0.0, 1.0, 0.0),
        (0.0, 1.0, -2.0),
    ])
    def test_invalid_parameters_raise_without_draws(self, counting, r_min, r_max, height):
        with pytest.raises(InvalidParameterError):
            sample_annular_cylinder((0, 0, 0), r_min, r_max, height, counting)
        assert counting.calls == 0

    def test_density(self, rng):
        origin = (0.0, 1.0, 0.0)
        pts = sample_annular_cylinder_batch(origin, 0.5, 2.0, 4.0, 20000, rng)
        assert pts.shape == (20000, 3)
        assert radial_uniformity(pts, origin, 0.5, 2.0).pvalue > 1e-4
        assert axial_uniformity(pts, origin, 4.0).pvalue > 1e-4


class TestTorus:

    def test_formula_with_scripted_draws(self, scripted):
        src = scripted([0.25, 0.25, 1.0])
        p = sample_torus((0.0, 0.0, 0.0), 3.0, 1.0, src)
        # theta = pi/2 -> ring point on +z; phi = pi/2 -> top of the tube
        np.testing.assert_allclose(p, [0.0, 1.0, 3.0], atol=1e-12)
        assert src.calls == 3

    def test_outer_equator(self, scripted):
        p = sample_torus((1.0, 1.0, 1.0), 2.0, 0.5, scripted([0.0, 0.0, 1.0]))
        np.testing.assert_allclose(p, [3.5, 1.0, 1.0], atol=1e-12)

    def test_points_within_bounds(self, rng):
        origin = np.array([1.0, -1.0, 2.0])
        R, r = 3.0, 1.0
        pts = np.array([sample_torus(origin, R, r, rng) for _ in range(10000)])
        rho = planar_distance(pts, origin)
        assert rho.min() >= R - r - 1e-9
        assert rho.max() <= R + r + 1e-9
        assert tube_distance(pts, origin, R).max() <= r + 1e-9
        assert np.abs(pts[:, 1] - origin[1]).max() <= r + 1e-9

    def test_zero_minor_radius_samples_the_ring(self, rng):
        pts = sample_torus_batch((0.0, 0.0, 0.0), 2.0, 0.0, 100, rng)
        np.testing.assert_allclose(planar_distance(pts, (0, 0, 0)), 2.0)
        np.testing.assert_allclose(pts[:, 1], 0.0)

    def test_three_draws_per_call(self, counting):
        for _ in range(10):
            sample_torus((0, 0, 0), 2.0, 1.0, counting)
        assert counting.calls == 30

    def test_reproducible(self):
        a = sample_torus((0, 0, 0), 2.0, 1.0, np.random.default_rng(9))
        b = sample_torus((0, 0, 0), 2.0, 1.0, np.random.default_rng(9))
        np.testing.assert_array_equal(a, b)

    @pytest.mark.parametrize("R, r", [
        (1.0, 1.0),
        (1.0, 2.0),
        (2.0, -0.1),
        (0.0, 0.0),
    ])
    def test_invalid_radii_raise_without_draws(self, counting, R, r):
        with pytest.raises(InvalidParameterError):
            sample_torus((0, 0, 0), R, r, counting)
        assert counting.calls == 0

    def test_cross_section_uniform_by_area(self, rng):
        pts = sample_torus_batch((0, 0, 0), 2.0, 1.5, 20000, rng)
        assert np.all(in_torus(pts, (0, 0, 0), 2.0, 1.5))
        assert tube_uniformity(pts, (0, 0, 0), 2.0, 1.5).pvalue > 1e-4

    def test_default_mode_is_not_volume_uniform(self, rng):
        pts = sample_torus_batch((0, 0, 0), 1.0, 0.9, 50000, rng)
        rep = tube_angle_uniformity(pts, (0, 0, 0), 1.0, 0.9, bins=8)
        assert rep.pvalue < 1e-6
        # mean distance from the axis stays at R
        assert planar_distance(pts, (0, 0, 0)).mean() == pytest.approx(1.0, abs=0.02)


class TestExactTorus:

    def test_bounds_and_volume_uniformity(self, rng):
        pts = sample_torus_batch((0, 0, 0), 1.0, 0.9, 50000, rng, exact=True)
        assert pts.shape == (50000, 3)
        assert np.all(in_torus(pts, (0, 0, 0), 1.0, 0.9))
        assert tube_angle_uniformity(pts, (0, 0, 0), 1.0, 0.9, bins=8).pvalue > 1e-4
        assert tube_uniformity(pts, (0, 0, 0), 1.0, 0.9).pvalue > 1e-4

    def test_mean_axis_distance_shifts_outward(self, rng):
        R, r = 1.0, 0.9
        pts = sample_torus_batch((0, 0, 0), R, r, 20000, rng, exact=True)
        # volume centroid of the tube cross-section sits at R + r^2 / (4R)
        assert planar_distance(pts, (0, 0, 0)).mean() == pytest.approx(R + r * r / (4 * R), abs=0.02)

    def test_single_point_mode(self, rng):
        pts = np.array([sample_torus((0, 0, 0), 1.0, 0.9, rng, exact=True) for _ in range(5000)])
        assert np.all(in_torus(pts, (0, 0, 0), 1.0, 0.9))
        assert planar_distance(pts, (0, 0, 0)).mean() == pytest.approx(1.2025, abs=0.03)

    def test_rejection_consumes_extra_draws(self, scripted):
        # attempt 1: phi = pi, r = 0.9 -> acceptance (1 - 0.9) / 1.9, U = 0.5 rejects
        # attempt 2: phi = 0, r = 0.9 -> acceptance 1, U = 0.5 accepts
        src = scripted([0.0, 0.5, 1.0, 0.5, 0.0, 1.0, 0.5])
        p = sample_torus((0, 0, 0), 1.0, 0.9, src, exact=True)
        np.testing.assert_allclose(p, [1.9, 0.0, 0.0], atol=1e-12)
        assert src.calls == 7

    def test_zero_minor_radius_always_accepts(self, counting):
        sample_torus((0, 0, 0), 1.0, 0.0, counting, exact=True)
        assert counting.calls == 4

    def test_volume_helper_consistent(self):
        from geosample.regions import torus_volume
        assert torus_volume(2.0, 0.5) == pytest.approx(2.0 * math.pi ** 2 * 2.0 * 0.25)
