import math

import pytest

from gridslamlog.boundingbox import OrientedBoundingBox
from gridslamlog.geometry import Point


def _rotated_rectangle(half_w, half_h, angle, shift=(0.0, 0.0)):
    c, s = math.cos(angle), math.sin(angle)
    corners = [(half_w, half_h), (-half_w, half_h), (-half_w, -half_h), (half_w, -half_h)]
    return [Point(c * x - s * y + shift[0], s * x + c * y + shift[1]) for x, y in corners]


def test_area_of_rotated_rectangle():
    box = OrientedBoundingBox(_rotated_rectangle(2.0, 1.0, math.pi / 6))
    assert box.area() == pytest.approx(4.0 * 2.0)


def test_translation_invariance():
    a = OrientedBoundingBox(_rotated_rectangle(2.0, 1.0, 0.4))
    b = OrientedBoundingBox(_rotated_rectangle(2.0, 1.0, 0.4, shift=(10.0, -3.0)))
    assert a.area() == pytest.approx(b.area())
    assert b.ul.x - a.ul.x == pytest.approx(10.0)


def test_corners_form_rectangle():
    box = OrientedBoundingBox(_rotated_rectangle(3.0, 1.0, 1.0))
    diag1 = box.ul - box.lr
    diag2 = box.ur - box.ll
    assert diag1.dot(diag1) == pytest.approx(diag2.dot(diag2))


def test_accepts_tuples():
    pts = [(p.x, p.y) for p in _rotated_rectangle(2.0, 1.0, 0.3)]
    assert OrientedBoundingBox(pts).area() == pytest.approx(8.0)


def test_axis_aligned_points_raise():
    with pytest.raises(ValueError):
        OrientedBoundingBox([(1, 1), (-1, 1), (-1, -1), (1, -1)])


def test_empty_raises():
    with pytest.raises(ValueError):
        OrientedBoundingBox([])