# -*- coding: utf-8 -*-

# experiments/smoke_test_samplers.py
import yaml
import numpy as np
from geosample.sampler import ShapeSampler, SamplerConfig
from geosample.regions import in_annulus, in_annular_cylinder, in_torus

def main():
    with open("experiments/config.yaml", "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    sampler_cfg = SamplerConfig(**cfg["sampler"])
    sampler = ShapeSampler(sampler_cfg)
    c = sampler_cfg

    T = int(cfg["experiment"]["smoke_steps"])
    for t in range(T):
        a = sampler.annulus()
        p_cyl = sampler.annular_cylinder()
        p_tor = sampler.torus()
        print(f"t={t:02d}  annulus={np.round(a, 3)}  cylinder={np.round(p_cyl, 3)}  torus={np.round(p_tor, 3)}")

    # Batches must stay inside their regions
    inside = {
        "annulus": in_annulus(sampler.draw("annulus"), c.annulus_origin,
                              c.annulus_r_min, c.annulus_r_max).mean(),
        "annular_cylinder": in_annular_cylinder(sampler.draw("annular_cylinder"), c.cylinder_origin,
                                                c.cylinder_r_min, c.cylinder_r_max,
                                                c.cylinder_height).mean(),
        "torus": in_torus(sampler.draw("torus"), c.torus_origin, c.torus_major, c.torus_minor).mean(),
    }
    for shape, frac in inside.items():
        print(f"{shape:>17s}: {100.0 * frac:.1f}% of {c.n_samples} samples inside")

if __name__ == "__main__":
    main()
