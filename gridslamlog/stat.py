"""Gaussian sampling and evaluation helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from gridslamlog.geometry import OrientedPoint


def _source(rng):
    return random if rng is None else rng


def _nonzero_uniform(rng) -> float:
    r = rng.random()
    while r == 0.0:
        r = rng.random()
    return r


def ran_gaussian(sigma: float, rng=None) -> float:
    """Draw from a zero-mean Gaussian with deviation sigma (polar Box-Muller)."""
    rng = _source(rng)
    while True:
        x1 = 2.0 * _nonzero_uniform(rng) - 1.0
        x2 = 2.0 * _nonzero_uniform(rng) - 1.0
        w = x1 * x1 + x2 * x2
        if 0.0 < w <= 1.0:
            break
    return sigma * x2 * math.sqrt(-2.0 * math.log(w) / w)


def sample_gaussian(sigma: float, seed: int = 0, rng=None) -> float:
    """Draw from a zero-mean Gaussian; a non-zero seed reseeds the generator first."""
    rng = _source(rng)
    if seed != 0:
        rng.seed(seed)
    if sigma == 0:
        return 0.0
    return ran_gaussian(sigma, rng)


def eval_log_gaussian(sigma_square: float, delta: float) -> float:
    """Log density of a zero-mean Gaussian with variance sigma_square at delta."""
    if sigma_square <= 0:
        sigma_square = 1e-4
    return -0.5 * delta * delta / sigma_square - 0.5 * math.log(2 * math.pi * sigma_square)


def _identity() -> list[list[float]]:
    return [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]


@dataclass
class Gaussian3:
    """A Gaussian over poses, held as a mean and an eigen-decomposed covariance.

    The eigenvectors are the columns of ``eigenvectors``; ``eigenvalues``
    holds the matching variances.
    """

    mean: OrientedPoint = OrientedPoint()
    eigenvectors: list[list[float]] = field(default_factory=_identity)
    eigenvalues: list[float] = field(default_factory=lambda: [1.0, 1.0, 1.0])

    def eval(self, p: OrientedPoint) -> float:
        """Log density of the pose p."""
        dtheta = p.theta - self.mean.theta
        q = (
            p.x - self.mean.x,
            p.y - self.mean.y,
            math.atan2(math.sin(dtheta), math.cos(dtheta)),
        )
        total = 0.0
        for j, variance in enumerate(self.eigenvalues):
            v = sum(self.eigenvectors[i][j] * q[i] for i in range(3))
            total += eval_log_gaussian(variance, v)
        return total