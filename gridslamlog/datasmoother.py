"""Parzen-window smoothing of one-dimensional weighted samples."""

from __future__ import annotations

import bisect
import math
import random
import sys
from dataclasses import dataclass

from gridslamlog.stat import sample_gaussian


def gauss(x: float, mean: float, sigma: float) -> float:
    """Density of a Gaussian with the given mean and deviation at x."""
    return 1.0 / (math.sqrt(2.0 * math.pi) * sigma) * math.exp(-0.5 * ((x - mean) / sigma) ** 2)


def _frange(start: float, stop: float, step: float):
    if step <= 0:
        raise ValueError("step must be positive")
    x = start
    while x <= stop:
        yield x
        x += step


@dataclass
class _DataPoint:
    x: float
    y: float


class DataSmoother:
    """A density built from weighted samples with a Gaussian kernel of width parzen_window."""

    def __init__(self, parzen_window: float, rng=None) -> None:
        self.rng = random if rng is None else rng
        self.reset(parzen_window)

    def reset(self, parzen_window: float) -> None:
        """Drop all data and start over with a new window."""
        self.data: list[_DataPoint] = []
        self._cumulated: list[float] = []
        self.total = -1.0
        self.parzen_window = parzen_window
        self.x_from = sys.float_info.max
        self.x_to = -sys.float_info.max
        self.last_step = 0.001

    def _require_data(self) -> None:
        if not self.data:
            raise ValueError("no data in smoother")

    def set_min_to_zero(self) -> None:
        """Shift all weights so that the smallest becomes zero."""
        if self.data:
            minval = min(d.y for d in self.data)
            for d in self.data:
                d.y -= minval
        self._cumulated = []

    def add(self, x: float, p: float) -> None:
        """Add a sample at x with weight p."""
        self.data.append(_DataPoint(x, p))
        self.total = -1.0
        reach = 3.0 * self.parzen_window
        self.x_from = min(self.x_from, x - reach)
        self.x_to = max(self.x_to, x + reach)
        self._cumulated = []

    def integrate(self, step: float) -> float:
        """Integrate the smoothed density over its whole range and remember the result."""
        self.last_step = step
        self.total = sum(self.smoothed_data(x) * step for x in _frange(self.x_from, self.x_to, step))
        return self.total

    def integral(self, step: float, x_to: float) -> float:
        """Integral of the smoothed density from the lower end up to x_to."""
        return sum(self.smoothed_data(x) * step for x in _frange(self.x_from, x_to, step))

    def smoothed_data(self, x: float) -> float:
        """Value of the smoothed density at x."""
        self._require_data()
        w = self.parzen_window
        p = sum(d.y * math.exp(-0.5 * (abs(x - d.x) / w) ** 2) for d in self.data)
        sum_y = sum(d.y for d in self.data)
        return p / (math.sqrt(2.0 * math.pi) * sum_y * w)

    def sample_numeric(self, step: float) -> float:
        """Draw from the smoothed density by numeric inversion on a grid."""
        self._require_data()
        if self.total < 0 or step != self.last_step:
            self.integrate(step)
        r = self.rng.uniform(0.0, self.total)
        acc = 0.0
        for x in _frange(self.x_from, self.x_to, step):
            acc += self.smoothed_data(x) * step
            if acc > r:
                return x - 0.5 * step
        return self.x_to

    def _compute_cumulated(self) -> None:
        acc = 0.0
        self._cumulated = []
        for d in self.data:
            acc += d.y
            self._cumulated.append(acc)

    def _draw_index_sums(self):
        if not self._cumulated:
            self._compute_cumulated()
        acc = 0.0
        for i, c in enumerate(self._cumulated):
            acc += c
            yield i, acc

    def sample(self) -> float:
        """Draw one sample: pick a data point, then add kernel noise."""
        self._require_data()
        if not self._cumulated:
            self._compute_cumulated()
        target = self.rng.uniform(0.0, self._cumulated[-1])
        for i, acc in self._draw_index_sums():
            if acc >= target:
                return self.data[i].x + sample_gaussian(self.parzen_window, 0, self.rng)
        raise RuntimeError("sampling ran past the data")

    def sample_multiple(self, num: int) -> list[float]:
        """Draw num samples in one sorted sweep over the data."""
        self._require_data()
        if not self._cumulated:
            self._compute_cumulated()
        maxval = self._cumulated[-1]
        randoms = sorted(self.rng.uniform(0.0, maxval) for _ in range(num))
        samples: list[float] = []
        j = 0
        for i, acc in self._draw_index_sums():
            if j >= num:
                break
            k = bisect.bisect_right(randoms, acc, lo=j)
            for _ in range(j, k):
                samples.append(self.data[i].x + sample_gaussian(self.parzen_window, 0, self.rng))
            j = k
        return samples

    def approx_gauss(self, step: float) -> tuple[float, float]:
        """Mean and deviation of the smoothed density, computed on a grid."""
        self._require_data()
        grid = [(x, self.smoothed_data(x)) for x in _frange(self.x_from, self.x_to, step)]
        total = sum(d for _, d in grid)
        mean = sum(x * d for x, d in grid) / total
        var = sum((x - mean) ** 2 * d for x, d in grid) / total
        return mean, math.sqrt(var)

    def cramer_von_mises_to_gauss(self, step: float, mean: float, sigma: float) -> float:
        """Cramer-von Mises distance between the smoothed density and a Gaussian."""
        p = sint = gint = 0.0
        for x in _frange(self.x_from, self.x_to, step):
            sint += self.smoothed_data(x) * step
            gint += gauss(x, mean, sigma) * step
            p += (sint - gint) ** 2
        return p

    def kld_to_gauss(self, step: float, mean: float, sigma: float) -> float:
        """Kullback-Leibler divergence from a Gaussian to the smoothed density."""
        p = sd = sg = 0.0
        for x in _frange(self.x_from, self.x_to, step):
            d = 1e-10 + self.smoothed_data(x)
            g = 1e-10 + gauss(x, mean, sigma)
            sd += d
            sg += g
            p += d * math.log(d / g)
        sd *= step
        sg *= step
        if abs(sd - sg) > 0.1:
            raise ValueError("densities do not share their support")
        return p * step

    def dump_data(self, stream) -> None:
        """Write the raw samples as 'x y' lines."""
        for d in self.data:
            stream.write("%f %f\n" % (d.x, d.y))

    def dump_smoothed_data(self, stream, step: float) -> None:
        """Write the smoothed density on a grid as 'x value' lines."""
        for x in _frange(self.x_from, self.x_to, step):
            stream.write("%f %f\n" % (x, self.smoothed_data(x)))