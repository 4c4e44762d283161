import math
import random
import statistics

import pytest

from gridslamlog.geometry import OrientedPoint
from gridslamlog.stat import Gaussian3, eval_log_gaussian, ran_gaussian, sample_gaussian


def test_sample_gaussian_zero_sigma_is_zero():
    assert sample_gaussian(0.0, 0, random.Random(1)) == 0.0


def test_sample_gaussian_seed_is_reproducible():
    a = sample_gaussian(2.0, 17, random.Random(5))
    b = sample_gaussian(2.0, 17, random.Random(99))
    assert a == b


def test_ran_gaussian_statistics():
    rng = random.Random(42)
    samples = [ran_gaussian(3.0, rng) for _ in range(20000)]
    assert abs(statistics.fmean(samples)) < 0.1
    assert statistics.pstdev(samples) == pytest.approx(3.0, rel=0.05)


def test_eval_log_gaussian_symmetric_and_peaked():
    assert eval_log_gaussian(2.0, 1.5) == pytest.approx(eval_log_gaussian(2.0, -1.5))
    assert eval_log_gaussian(2.0, 0.0) > eval_log_gaussian(2.0, 0.3)


def test_eval_log_gaussian_nonpositive_variance_clamped():
    assert eval_log_gaussian(0.0, 0.01) == eval_log_gaussian(1e-4, 0.01)
    assert eval_log_gaussian(-3.0, 0.2) == eval_log_gaussian(1e-4, 0.2)


def test_gaussian3_eval_at_mean_is_sum_of_peaks():
    g = Gaussian3(OrientedPoint(1.0, 2.0, 0.5), eigenvalues=[1.0, 2.0, 0.5])
    expected = sum(eval_log_gaussian(v, 0.0) for v in [1.0, 2.0, 0.5])
    assert g.eval(OrientedPoint(1.0, 2.0, 0.5)) == pytest.approx(expected)


def test_gaussian3_eval_wraps_angle():
    g = Gaussian3(OrientedPoint(0.0, 0.0, 3.0))
    p = OrientedPoint(0.1, -0.2, -3.0)
    q = OrientedPoint(0.1, -0.2, -3.0 + 2 * math.pi)
    assert g.eval(p) == pytest.approx(g.eval(q))


def test_gaussian3_eval_decreases_away_from_mean():
    g = Gaussian3(OrientedPoint(0.0, 0.0, 0.0))
    assert g.eval(OrientedPoint(0.0, 0.0, 0.0)) > g.eval(OrientedPoint(1.0, 0.0, 0.0))