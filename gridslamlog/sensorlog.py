"""Loading the sensor readings of a CARMEN log into memory."""

from __future__ import annotations

from gridslamlog.geometry import OrientedPoint
from gridslamlog.sensors import (
    OdometryReading,
    OdometrySensor,
    RangeReading,
    RangeSensor,
)


class _TokenReader:
    """Reads whitespace-separated fields the way a formatted input stream does.

    After the first failure every further read leaves its target unchanged.
    """

    def __init__(self, tokens) -> None:
        self._tokens = iter(tokens)
        self.failed = False

    def _next(self) -> str | None:
        if self.failed:
            return None
        token = next(self._tokens, None)
        if token is None:
            self.failed = True
        return token

    def word(self, current: str = "") -> str:
        token = self._next()
        return current if token is None else token

    def number(self, current: float = 0.0) -> float:
        token = self._next()
        if token is None:
            return current
        try:
            return float(token)
        except ValueError:
            self.failed = True
            return 0.0

    def integer(self, current: int = 0) -> int:
        token = self._next()
        if token is None:
            return current
        try:
            return int(token)
        except ValueError:
            self.failed = True
            return 0


def parse_log_odometry(tokens, sensor: OdometrySensor) -> OdometryReading:
    """An odometry reading from the fields after the sensor name."""
    r = _TokenReader(tokens)
    x, y, theta = r.number(), r.number(), r.number()
    speed_x = r.number()
    speed_theta = r.number()
    accel_x = r.number()
    return OdometryReading(
        sensor=sensor,
        pose=OrientedPoint(x, y, theta),
        speed=OrientedPoint(speed_x, 0.0, speed_theta),
        acceleration=OrientedPoint(accel_x, 0.0, 0.0),
    )


def parse_log_range(tokens, sensor: RangeSensor) -> RangeReading:
    """A range reading from the fields after the sensor name."""
    r = _TokenReader(tokens)
    if sensor.new_format:
        for _ in range(7):
            r.word()
    size = r.integer(-1)
    if size != len(sensor.beams):
        raise ValueError(
            f"{sensor.name}: {size} ranges in the log for a sensor with {len(sensor.beams)} beams"
        )
    ranges = [r.number() for _ in range(size)]
    if sensor.new_format:
        for _ in range(r.integer(0)):
            r.number()
    for _ in range(3):
        r.number()
    pose = OrientedPoint(r.number(), r.number(), r.number())
    stamp = 0.0
    if sensor.new_format:
        for _ in range(5):
            r.word()
    else:
        stamp = r.number(stamp)
        r.number()
        r.number()
    stamp = r.number(stamp)
    r.word()
    stamp = r.number(stamp)
    return RangeReading(sensor=sensor, time=stamp, ranges=ranges, pose=pose)


class SensorLog(list):
    """The readings of a log, in file order, for the sensors of a sensor map."""

    def __init__(self, sensor_map, readings=()) -> None:
        super().__init__(readings)
        self.sensor_map = sensor_map

    def load(self, stream) -> None:
        """Replace the content with the readings found in an iterable of log lines."""
        self.clear()
        for line in stream:
            tokens = line.split()
            if not tokens:
                continue
            sensor = self.sensor_map.get(tokens[0])
            if isinstance(sensor, OdometrySensor):
                self.append(parse_log_odometry(tokens[1:], sensor))
            elif isinstance(sensor, RangeSensor):
                self.append(parse_log_range(tokens[1:], sensor))

    def bounding_box(self):
        """The pose of the first scan and the (xmin, ymin, xmax, ymax) box of all poses."""
        xmin = ymin = 1e6
        xmax = ymax = -1e6
        start = None
        for reading in self:
            if isinstance(reading, (OdometryReading, RangeReading)):
                x, y = reading.pose.x, reading.pose.y
            else:
                x = y = 0.0
            if isinstance(reading, RangeReading) and start is None:
                start = reading.pose
            xmin = min(xmin, x)
            xmax = max(xmax, x)
            ymin = min(ymin, y)
            ymax = max(ymax, y)
        if start is None:
            start = OrientedPoint()
        return start, (xmin, ymin, xmax, ymax)