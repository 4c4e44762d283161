"""Oriented bounding box of a planar point set along its principal axes."""

from __future__ import annotations

import math

from gridslamlog.geometry import Point


def _as_point(p) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


def _distance(a: Point, b: Point) -> float:
    d = a - b
    return math.sqrt(d.dot(d))


class OrientedBoundingBox:
    """Box aligned with the eigenvectors of the points' covariance.

    Its corners are ``ul``, ``ur``, ``ll`` and ``lr``.
    """

    def __init__(self, points) -> None:
        pts = [_as_point(p) for p in points]
        if not pts:
            raise ValueError("no points for a bounding box")
        n = len(pts)
        cx = sum(p.x for p in pts) / n
        cy = sum(p.y for p in pts) / n

        x1 = sum((p.x - cx) ** 2 for p in pts) / n
        x2 = sum((p.x - cx) * (p.y - cy) for p in pts) / n
        x3 = x2
        x4 = sum((p.y - cy) ** 2 for p in pts) / n

        term = x4 * x4 - 2 * x1 * x4 + x1 * x1 + 4 * x2 * x3
        if x3 == 0 or x2 == 0 or term < 0:
            raise ValueError(
                f"cannot compute the eigenvectors: x3={x3}, x2={x2}, term={term}"
            )

        root = math.sqrt(term)
        vectors = []
        for lam in (0.5 * (x4 + x1 + root), 0.5 * (x4 + x1 - root)):
            vx = -(x4 - lam) * (x4 - lam) * (x1 - lam) / (x2 * x3 * x3)
            vy = (x4 - lam) * (x1 - lam) / (x2 * x3)
            length = math.hypot(vx, vy)
            vectors.append((vx / length, vy / length))
        (v1x, v1y), (v2x, v2y) = vectors

        proj1 = [(p.x - cx) * v1x + (p.y - cy) * v1y for p in pts]
        proj2 = [(p.x - cx) * v2x + (p.y - cy) * v2y for p in pts]
        xmin, xmax = min(proj1), max(proj1)
        ymin, ymax = min(proj2), max(proj2)

        def corner(a: float, b: float) -> Point:
            return Point(cx + a * v1x + b * v2x, cy + a * v1y + b * v2y)

        self.ul = corner(xmin, ymin)
        self.ur = corner(xmax, ymin)
        self.ll = corner(xmin, ymax)
        self.lr = corner(xmax, ymax)

    def area(self) -> float:
        return _distance(self.ul, self.ll) * _distance(self.ul, self.ur)