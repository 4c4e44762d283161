"""Sensors (odometry and range finders) and the readings they produce."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

from gridslamlog.geometry import OrientedPoint, Point


@dataclass(eq=False)
class Sensor:
    """A named sensor."""

    name: str


@dataclass(eq=False)
class OdometrySensor(Sensor):
    """Wheel odometry; an ideal one reports the true pose."""

    ideal: bool = False


@dataclass
class Beam:
    """One beam of a range sensor, with cached sine and cosine of its angle."""

    pose: OrientedPoint = OrientedPoint()
    span: float = 0.0
    max_range: float = 0.0
    s: float = 0.0
    c: float = 1.0


@dataclass(eq=False)
class RangeSensor(Sensor):
    """A range finder made of beams mounted at a pose on the robot."""

    pose: OrientedPoint = OrientedPoint()
    beams: list[Beam] = field(default_factory=list)
    new_format: bool = False

    def update_beams_lookup(self) -> None:
        """Refresh the cached sine and cosine of every beam angle."""
        for beam in self.beams:
            beam.s = math.sin(beam.pose.theta)
            beam.c = math.cos(beam.pose.theta)

    @classmethod
    def uniform(cls, name, beams_num, resolution, position, span, max_range) -> RangeSensor:
        """A sensor whose beams are evenly spaced, starting at -resolution*beams_num/2."""
        start = -0.5 * resolution * beams_num
        beams = [
            Beam(pose=OrientedPoint(0.0, 0.0, start + i * resolution), span=span, max_range=max_range)
            for i in range(beams_num)
        ]
        sensor = cls(name, pose=position, beams=beams, new_format=False)
        sensor.update_beams_lookup()
        return sensor


@dataclass
class SensorReading:
    """A time-stamped reading of a sensor."""

    sensor: Sensor | None = None
    time: float = 0.0


@dataclass
class OdometryReading(SensorReading):
    pose: OrientedPoint = OrientedPoint()
    speed: OrientedPoint = OrientedPoint()
    acceleration: OrientedPoint = OrientedPoint()


@dataclass
class RangeReading(SensorReading):
    """A scan: one range per beam of the sensor, taken at a robot pose."""

    ranges: list[float] = field(default_factory=list)
    pose: OrientedPoint = OrientedPoint()

    def __post_init__(self) -> None:
        self.ranges = [float(r) for r in self.ranges]
        if self.ranges and isinstance(self.sensor, RangeSensor):
            if len(self.ranges) != len(self.sensor.beams):
                raise ValueError(
                    f"{len(self.ranges)} ranges for a sensor with {len(self.sensor.beams)} beams"
                )

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self):
        return iter(self.ranges)

    def __getitem__(self, index):
        return self.ranges[index]

    def _range_sensor(self) -> RangeSensor:
        if not isinstance(self.sensor, RangeSensor):
            raise TypeError("reading is not attached to a range sensor")
        return self.sensor

    def _kept(self, density: float):
        """Yield for each beam whether it lies at least `density` from the last kept point."""
        sensor = self._range_sensor()
        last = Point(0.0, 0.0)
        for rho, beam in zip(self.ranges, sensor.beams):
            lp = Point(math.cos(beam.pose.theta) * rho, math.sin(beam.pose.theta) * rho)
            dp = last - lp
            if math.sqrt(dp.dot(dp)) < density:
                yield False
            else:
                last = lp
                yield True

    def raw_view(self, density: float) -> list[float]:
        """The ranges, with beams closer than `density` to the previous kept one set to the largest float."""
        if density == 0:
            return list(self.ranges)
        return [
            rho if keep else sys.float_info.max
            for rho, keep in zip(self.ranges, self._kept(density))
        ]

    def active_beams(self, density: float) -> int:
        """How many beams survive the density filter of raw_view."""
        if density == 0:
            return len(self.ranges)
        return sum(self._kept(density))

    def cartesian_form(self, max_range: float) -> list[Point]:
        """Beam end points in the robot frame; beams at or beyond max_range give the origin."""
        sensor = self._range_sensor()
        if not sensor.beams:
            raise ValueError("range sensor has no beams")
        px, py = sensor.pose.x, sensor.pose.y
        ps, pc = math.sin(sensor.pose.theta), math.cos(sensor.pose.theta)
        points = []
        for rho, beam in zip(self.ranges, sensor.beams):
            if rho >= max_range:
                points.append(Point(0.0, 0.0))
                continue
            bx = beam.pose.x + beam.c * rho
            by = beam.pose.y + beam.s * rho
            points.append(Point(px + pc * bx - ps * by, py + ps * bx + pc * by))
        return points