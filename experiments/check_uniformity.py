# -*- coding: utf-8 -*-

# experiments/check_uniformity.py
import yaml
import numpy as np

from geosample.sampler import ShapeSampler, SamplerConfig
from geosample.diagnostics import (
    radial_uniformity, axial_uniformity, tube_uniformity, tube_angle_uniformity
)

def naive_annulus(cfg, n, rng):
    """Uniform radius instead of uniform r^2: piles points up at the inner edge."""
    theta = rng.uniform(0.0, 2.0 * np.pi, size=n)
    r = rng.uniform(cfg.annulus_r_min, cfg.annulus_r_max, size=n)
    return np.vstack([r * np.cos(theta), r * np.sin(theta)]).T + np.array(cfg.annulus_origin)

def main():
    with open("experiments/config.yaml", "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    sampler_cfg = SamplerConfig(**cfg["sampler"])
    bins = int(cfg["experiment"]["bins"])
    alpha = float(cfg["experiment"]["alpha"])
    c = sampler_cfg

    sampler = ShapeSampler(sampler_cfg)
    n = c.n_samples

    reports = {}
    pts = sampler.draw("annulus")
    reports["annulus radial"] = radial_uniformity(pts, c.annulus_origin, c.annulus_r_min, c.annulus_r_max, bins)
    naive = naive_annulus(c, n, sampler.rng)
    reports["naive annulus radial"] = radial_uniformity(naive, c.annulus_origin,
                                                        c.annulus_r_min, c.annulus_r_max, bins)

    pts = sampler.draw("annular_cylinder")
    reports["cylinder radial"] = radial_uniformity(pts, c.cylinder_origin, c.cylinder_r_min, c.cylinder_r_max, bins)
    reports["cylinder axial"] = axial_uniformity(pts, c.cylinder_origin, c.cylinder_height, bins)

    pts = sampler.draw("torus")
    reports["torus tube radial"] = tube_uniformity(pts, c.torus_origin, c.torus_major, c.torus_minor, bins)
    reports["torus tube angle"] = tube_angle_uniformity(pts, c.torus_origin, c.torus_major, c.torus_minor, bins)

    # Same torus with the exact (rejection) cross-section
    sampler.cfg.torus_exact = not c.torus_exact
    pts = sampler.draw("torus")
    label = "exact" if sampler.cfg.torus_exact else "approximate"
    reports[f"torus tube angle ({label})"] = tube_angle_uniformity(pts, c.torus_origin, c.torus_major,
                                                                   c.torus_minor, bins)

    print(f"n={n} samples per shape, {bins} bins, alpha={alpha}")
    for name, rep in reports.items():
        verdict = "uniform" if rep.is_uniform(alpha) else "NOT uniform"
        print(f"{name:>32s}: chi2={rep.statistic:10.2f}  p={rep.pvalue:.3g}  outside={rep.outside}  -> {verdict}")

if __name__ == "__main__":
    main()
