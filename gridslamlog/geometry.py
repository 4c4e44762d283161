"""Planar points, oriented poses and forward/sideward/rotate movements."""

from __future__ import annotations

import math
from dataclasses import dataclass


def normalize_angle(angle: float) -> float:
    """Bring an angle into the half-open interval [-pi, pi)."""
    if -math.pi <= angle < math.pi:
        return angle
    multiplier = int(angle / (2 * math.pi))
    angle -= multiplier * 2 * math.pi
    if angle >= math.pi:
        angle -= 2 * math.pi
    if angle < -math.pi:
        angle += 2 * math.pi
    return angle


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: Point) -> float:
        """Scalar product of two points taken as vectors."""
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class OrientedPoint:
    """A pose in the plane: position plus heading."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def __add__(self, other: OrientedPoint) -> OrientedPoint:
        return OrientedPoint(self.x + other.x, self.y + other.y, self.theta + other.theta)

    def __sub__(self, other: OrientedPoint) -> OrientedPoint:
        return OrientedPoint(self.x - other.x, self.y - other.y, self.theta - other.theta)

    def __mul__(self, factor: float) -> OrientedPoint:
        return OrientedPoint(self.x * factor, self.y * factor, self.theta * factor)

    __rmul__ = __mul__

    def normalized(self) -> OrientedPoint:
        """The same pose with its heading brought into [-pi, pi)."""
        return OrientedPoint(self.x, self.y, normalize_angle(self.theta))


@dataclass(frozen=True)
class FSRMovement:
    """A relative movement: forward, sideward and rotation."""

    f: float = 0.0
    s: float = 0.0
    r: float = 0.0

    def normalized(self) -> FSRMovement:
        return FSRMovement(self.f, self.s, normalize_angle(self.r))

    def inverted(self) -> FSRMovement:
        return invert_move(self)

    def composed(self, other: FSRMovement) -> FSRMovement:
        return compose_moves(self, other)

    def move(self, pt: OrientedPoint) -> OrientedPoint:
        return move_point(pt, self)


def compose_moves(move1: FSRMovement, move2: FSRMovement) -> FSRMovement:
    """The movement made by doing move1 and then move2."""
    c, s = math.cos(move1.r), math.sin(move1.r)
    return FSRMovement(
        c * move2.f - s * move2.s + move1.f,
        s * move2.f + c * move2.s + move1.s,
        move1.r + move2.r,
    ).normalized()


def move_point(pt: OrientedPoint, move: FSRMovement) -> OrientedPoint:
    """Apply a relative movement to a pose."""
    c, s = math.cos(pt.theta), math.sin(pt.theta)
    return OrientedPoint(
        pt.x + move.f * c - move.s * s,
        pt.y + move.f * s + move.s * c,
        move.r + pt.theta,
    ).normalized()


def move_between_points(pt1: OrientedPoint, pt2: OrientedPoint) -> FSRMovement:
    """The relative movement that takes pt1 to pt2."""
    c, s = math.cos(pt1.theta), math.sin(pt1.theta)
    dx, dy = pt2.x - pt1.x, pt2.y - pt1.y
    return FSRMovement(dy * s + dx * c, dy * c - dx * s, pt2.theta - pt1.theta).normalized()


def invert_move(move: FSRMovement) -> FSRMovement:
    """The movement that undoes the given one."""
    c, s = math.cos(move.r), math.sin(move.r)
    return FSRMovement(
        -c * move.f - s * move.s,
        s * move.f - c * move.s,
        -move.r,
    ).normalized()


def frame_transformation(
    reference_frame1: OrientedPoint,
    reference_frame2: OrientedPoint,
    pt_frame1: OrientedPoint,
) -> OrientedPoint:
    """Express a pose given in frame 1 in frame 2, using one reference pose seen in both."""
    zero = OrientedPoint()
    itrans_ref1 = move_between_points(zero, reference_frame1).inverted()
    trans_ref2 = move_between_points(zero, reference_frame2)
    trans_pt = move_between_points(zero, pt_frame1)
    total = compose_moves(compose_moves(trans_ref2, itrans_ref1), trans_pt)
    return total.move(zero)