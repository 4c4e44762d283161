"""Streams of sensor readings, parsed line by line or replayed from a loaded log."""

from __future__ import annotations

import abc

from gridslamlog.geometry import OrientedPoint
from gridslamlog.sensorlog import SensorLog, _TokenReader
from gridslamlog.sensors import (
    OdometryReading,
    OdometrySensor,
    RangeReading,
    RangeSensor,
    SensorReading,
)


def parse_odometry(tokens, sensor: OdometrySensor) -> OdometryReading:
    """An odometry reading, with its time stamp, from the fields after the sensor name."""
    r = _TokenReader(tokens)
    x, y, theta = r.number(), r.number(), r.number()
    speed_x = r.number()
    speed_theta = r.number()
    accel_x = r.number()
    stamp = r.number()
    r.word()
    r.number()
    return OdometryReading(
        sensor=sensor,
        time=stamp,
        pose=OrientedPoint(x, y, theta),
        speed=OrientedPoint(speed_x, 0.0, speed_theta),
        acceleration=OrientedPoint(accel_x, 0.0, 0.0),
    )


def parse_range(tokens, sensor: RangeSensor) -> RangeReading:
    """A range reading, with its time stamp, from the fields after the sensor name."""
    r = _TokenReader(tokens)
    if sensor.new_format:
        for _ in range(7):
            r.word()
    size = r.integer(-1)
    if size != len(sensor.beams):
        raise ValueError(
            f"{sensor.name}: {size} ranges in the stream for a sensor with {len(sensor.beams)} beams"
        )
    ranges = [r.number() for _ in range(size)]
    if sensor.new_format:
        for _ in range(r.integer(0)):
            r.number()
    for _ in range(3):
        r.number()
    pose = OrientedPoint(r.number(), r.number(), r.number())
    if sensor.new_format:
        for _ in range(5):
            r.word()
    stamp = r.number()
    r.word()
    r.number()
    return RangeReading(sensor=sensor, time=stamp, ranges=ranges, pose=pose)


def parse_reading(line: str, sensor_map) -> SensorReading | None:
    """The reading on one log line, or None for blank lines and unknown sensors."""
    tokens = line.split()
    if not tokens:
        return None
    sensor = sensor_map.get(tokens[0])
    if isinstance(sensor, OdometrySensor):
        return parse_odometry(tokens[1:], sensor)
    if isinstance(sensor, RangeSensor):
        return parse_range(tokens[1:], sensor)
    return None


class SensorStream(abc.ABC):
    """A source of sensor readings for the sensors of a sensor map."""

    def __init__(self, sensor_map) -> None:
        self.sensor_map = sensor_map

    @abc.abstractmethod
    def rewind(self) -> bool:
        """Start again from the beginning; False when the stream cannot do so."""

    @abc.abstractmethod
    def __iter__(self):
        """Yield the remaining readings."""


class InputSensorStream(SensorStream):
    """Readings parsed on the fly from an iterable of log lines."""

    def __init__(self, sensor_map, stream) -> None:
        super().__init__(sensor_map)
        self._stream = stream

    def rewind(self) -> bool:
        return False

    def __iter__(self):
        for line in self._stream:
            reading = parse_reading(line, self.sensor_map)
            if reading is not None:
                yield reading


class LogSensorStream(SensorStream):
    """Readings replayed from a sensor log already in memory."""

    def __init__(self, sensor_map, log: SensorLog) -> None:
        super().__init__(sensor_map)
        if log is None:
            raise ValueError("a log is needed")
        self._log = log
        self._cursor = 0

    def __bool__(self) -> bool:
        return self._cursor < len(self._log)

    def rewind(self) -> bool:
        self._cursor = 0
        return True

    def __iter__(self):
        while self._cursor < len(self._log):
            reading = self._log[self._cursor]
            self._cursor += 1
            yield reading