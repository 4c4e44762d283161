"""Particle-filter helpers: weight handling, resampling and evolution steps.

Particles used by ``auxiliary_evolve`` carry a mutable ``weight`` attribute.
Evolution and qualification models provide ``evolve(particle)``; likelihood
models provide ``likelihood(particle)``.
"""

from __future__ import annotations

import math
import random
import sys


def to_normal_form(values) -> tuple[list[float], float]:
    """Turn log weights into weights relative to the largest; returns (weights, lmax)."""
    values = [float(v) for v in values]
    lmax = max(values, default=-sys.float_info.max)
    return [math.exp(v - lmax) for v in values], lmax


def to_log_form(values, lmax: float) -> list[float]:
    """Logarithms of the weights, shifted down by lmax."""
    return [math.log(float(v)) - lmax for v in values]


def resample(weights, nparticles: int = 0, rng=None) -> list[int]:
    """Low-variance (systematic) resampling; returns the chosen indexes.

    With nparticles > 0 that many indexes are drawn, otherwise one per weight.
    """
    rng = random if rng is None else rng
    weights = [float(w) for w in weights]
    n = nparticles if nparticles > 0 else len(weights)
    if not weights or n == 0:
        raise ValueError("cannot resample without weights")
    interval = sum(weights) / n
    target = interval * rng.random()
    indexes: list[int] = []
    cweight = 0.0
    for i, w in enumerate(weights):
        cweight += w
        while cweight > target and len(indexes) < n:
            indexes.append(i)
            target += interval
    return indexes


def normalize_weights(weights, min_weight: float) -> list[float]:
    """Map log weights linearly onto [log(min_weight), 0] and exponentiate."""
    weights = [float(w) for w in weights]
    if not weights:
        return []
    wmin, wmax = min(weights), max(weights)
    dn = math.log(1.0) - math.log(min_weight)
    dw = wmax - wmin
    if dw == 0:
        dw = 1
    scale = dn / dw
    offset = -wmax * scale
    return [math.exp(scale * w + offset) for w in weights]


def repeat_indexes(indexes, particles) -> list:
    """The particles picked by indexes, in that order."""
    return [particles[i] for i in indexes]


def repeat_indexes_into(indexes2, particles, indexes) -> list:
    """A copy of particles where slot indexes[i] holds particles[indexes2[i]]."""
    dest = list(particles)
    for slot, source in zip(indexes, indexes2):
        dest[slot] = particles[source]
    return dest


def neff(weights) -> float:
    """Effective number of particles of a weight set."""
    weights = [float(w) for w in weights]
    total = sum(weights)
    return 1.0 / sum((w / total) ** 2 for w in weights)


def rle(values) -> list[tuple[int, int]]:
    """Run-length encoding as (value, count) pairs."""
    runs: list[tuple[int, int]] = []
    for v in values:
        v = int(v)
        if runs and runs[-1][0] == v:
            runs[-1] = (v, runs[-1][1] + 1)
        else:
            runs.append((v, 1))
    return runs


def evolve(particles, model) -> list:
    """Apply the evolution model to every particle."""
    return [model.evolve(p) for p in particles]


def auxiliary_evolve(particles, qualification_model, evolution_model, likelihood_model, rng=None) -> list:
    """One auxiliary-particle-filter step.

    Particles are first scored on their qualified (predicted) state, resampled
    on those scores, evolved, and reweighted by the ratio of the new likelihood
    to the score they were picked with.
    """
    particles = list(particles)
    if not particles:
        return []
    scores = [likelihood_model.likelihood(qualification_model.evolve(p)) for p in particles]
    result = []
    for i in resample(scores, rng=rng):
        evolved = evolution_model.evolve(particles[i])
        evolved.weight *= likelihood_model.likelihood(evolved) / scores[i]
        result.append(evolved)
    return result