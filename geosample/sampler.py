# -*- coding: utf-8 -*-
"""
Seeded sampling session over the three configured shapes.
"""

# geosample/sampler.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .planar import sample_annulus, sample_annulus_batch
from .validation import InvalidParameterError
from .volumes import (
    sample_annular_cylinder, sample_annular_cylinder_batch,
    sample_torus, sample_torus_batch,
)

logger = logging.getLogger(__name__)

SHAPES = ("annulus", "annular_cylinder", "torus")


@dataclass
class SamplerConfig:
    # RNG
    seed: int = 42
    n_samples: int = 1000

    # Annulus (2D)
    annulus_origin: tuple = (0.0, 0.0)
    annulus_r_min: float = 1.0
    annulus_r_max: float = 2.0

    # Annular cylinder (3D, y is the height axis)
    cylinder_origin: tuple = (0.0, 0.0, 0.0)
    cylinder_r_min: float = 1.0
    cylinder_r_max: float = 2.0
    cylinder_height: float = 1.0

    # Torus (3D)
    torus_origin: tuple = (0.0, 0.0, 0.0)
    torus_major: float = 2.0
    torus_minor: float = 0.5
    torus_exact: bool = False

    def __post_init__(self):
        # Cast numeric-like strings (e.g. from yaml) to proper types
        float_fields = [
            "annulus_r_min", "annulus_r_max",
            "cylinder_r_min", "cylinder_r_max", "cylinder_height",
            "torus_major", "torus_minor",
        ]
        int_fields = ["seed", "n_samples"]
        origin_fields = {"annulus_origin": 2, "cylinder_origin": 3, "torus_origin": 3}

        for name in float_fields:
            val = getattr(self, name)
            try:
                setattr(self, name, float(val))
            except Exception as e:
                raise TypeError(f"SamplerConfig.{name} must be numeric, got {val!r} ({type(val)})") from e

        for name in int_fields:
            val = getattr(self, name)
            try:
                setattr(self, name, int(val))
            except Exception as e:
                raise TypeError(f"SamplerConfig.{name} must be int, got {val!r} ({type(val)})") from e

        for name, dim in origin_fields.items():
            val = getattr(self, name)
            try:
                coords = tuple(float(c) for c in val)
            except Exception as e:
                raise TypeError(f"SamplerConfig.{name} must be a sequence of numbers, got {val!r}") from e
            if len(coords) != dim:
                raise TypeError(f"SamplerConfig.{name} must have {dim} components, got {len(coords)}")
            setattr(self, name, coords)

        if isinstance(self.torus_exact, str):
            self.torus_exact = self.torus_exact.strip().lower() in ("1", "true", "yes", "on")
        else:
            self.torus_exact = bool(self.torus_exact)


class ShapeSampler:
    """
    Owns one numpy Generator seeded from the config and forwards it to the
    pure samplers, so a session with the same seed replays the same points.
    - annulus(), annular_cylinder(), torus(): one point each.
    - draw(shape, n): a batch of n points of the named shape.
    """

    def __init__(self, cfg: SamplerConfig):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.seed)
        logger.info("shape sampler seeded with %d", cfg.seed)

    def reset(self, seed: int | None = None):
        """Restart the random stream, from cfg.seed unless a seed is given."""
        seed = self.cfg.seed if seed is None else int(seed)
        self.rng = np.random.default_rng(seed)

    # ---------- Single points ----------

    def annulus(self) -> np.ndarray:
        c = self.cfg
        return sample_annulus(c.annulus_origin, c.annulus_r_min, c.annulus_r_max, self.rng)

    def annular_cylinder(self) -> np.ndarray:
        c = self.cfg
        return sample_annular_cylinder(
            c.cylinder_origin, c.cylinder_r_min, c.cylinder_r_max, c.cylinder_height, self.rng
        )

    def torus(self) -> np.ndarray:
        c = self.cfg
        return sample_torus(c.torus_origin, c.torus_major, c.torus_minor, self.rng, exact=c.torus_exact)

    # ---------- Batches ----------

    def draw(self, shape: str, n: int | None = None, dtype=None) -> np.ndarray:
        """
        shape: one of SHAPES
        n: batch size, defaults to cfg.n_samples
        Returns: (n, 2) for the annulus, (n, 3) otherwise.
        """
        c = self.cfg
        n = c.n_samples if n is None else n
        if shape == "annulus":
            return sample_annulus_batch(c.annulus_origin, c.annulus_r_min, c.annulus_r_max,
                                        n, self.rng, dtype=dtype)
        if shape == "annular_cylinder":
            return sample_annular_cylinder_batch(c.cylinder_origin, c.cylinder_r_min, c.cylinder_r_max,
                                                 c.cylinder_height, n, self.rng, dtype=dtype)
        if shape == "torus":
            return sample_torus_batch(c.torus_origin, c.torus_major, c.torus_minor, n, self.rng,
                                      exact=c.torus_exact, dtype=dtype)
        raise InvalidParameterError(f"unknown shape {shape!r}, expected one of {SHAPES}")
