import io

import pytest

from gridslamlog.geometry import OrientedPoint
from gridslamlog.sensorlog import SensorLog
from gridslamlog.sensorstream import (
    InputSensorStream,
    LogSensorStream,
    parse_odometry,
    parse_range,
    parse_reading,
)
from gridslamlog.sensors import (
    OdometryReading,
    OdometrySensor,
    RangeReading,
    RangeSensor,
)


def _sensor_map():
    flaser = RangeSensor.uniform("FLASER", 3, 0.1, OrientedPoint(), 0.0, 50.0)
    robot = RangeSensor.uniform("ROBOTLASER1", 2, 0.1, OrientedPoint(), 0.0, 50.0)
    robot.new_format = True
    return {
        "ODOM": OdometrySensor("ODOM"),
        "FLASER": flaser,
        "ROBOTLASER1": robot,
    }


ODOM_LINE = "ODOM 1 2 0.5 0.1 0.2 0.3 12.5 host 0.7"
FLASER_LINE = "FLASER 3 1 2 3 9 9 9 1.5 2.5 0.25 33.5 host 1.0"
ROBOT_LINE = "ROBOTLASER1 0 -1.5 3.1 0.01 80 0.01 0 2 4 5 2 0.1 0.2 9 9 9 3 4 1 a b c d e 44.5 host 1.0"


def test_parse_odometry_fields():
    smap = _sensor_map()
    reading = parse_odometry(ODOM_LINE.split()[1:], smap["ODOM"])
    assert reading.pose == OrientedPoint(1.0, 2.0, 0.5)
    assert reading.speed == OrientedPoint(0.1, 0.0, 0.2)
    assert reading.acceleration == OrientedPoint(0.3, 0.0, 0.0)
    assert reading.time == 12.5


def test_parse_range_old_format():
    smap = _sensor_map()
    reading = parse_range(FLASER_LINE.split()[1:], smap["FLASER"])
    assert reading.ranges == [1.0, 2.0, 3.0]
    assert reading.pose == OrientedPoint(1.5, 2.5, 0.25)
    assert reading.time == 33.5


def test_parse_range_new_format_skips_header_and_reflections():
    smap = _sensor_map()
    reading = parse_range(ROBOT_LINE.split()[1:], smap["ROBOTLASER1"])
    assert reading.ranges == [4.0, 5.0]
    assert reading.pose == OrientedPoint(3.0, 4.0, 1.0)
    assert reading.time == 44.5


def test_parse_range_size_mismatch_raises():
    smap = _sensor_map()
    with pytest.raises(ValueError):
        parse_range("2 1 2 0 0 0 0 0 0 1 h 1".split(), smap["FLASER"])


def test_parse_reading_dispatch():
    smap = _sensor_map()
    assert isinstance(parse_reading(ODOM_LINE, smap), OdometryReading)
    assert isinstance(parse_reading(FLASER_LINE, smap), RangeReading)
    assert parse_reading("", smap) is None
    assert parse_reading("PARAM robot_use_laser on", smap) is None


def test_input_stream_yields_known_readings_only():
    smap = _sensor_map()
    text = "\n".join(["PARAM x 1", ODOM_LINE, "", FLASER_LINE, "UNKNOWN 1 2"]) + "\n"
    stream = InputSensorStream(smap, io.StringIO(text))
    readings = list(stream)
    assert [r.sensor.name for r in readings] == ["ODOM", "FLASER"]
    assert stream.rewind() is False
    assert stream.sensor_map is smap


def test_log_stream_replays_and_rewinds():
    smap = _sensor_map()
    log = SensorLog(smap)
    log.load(io.StringIO(ODOM_LINE + "\n" + FLASER_LINE + "\n"))
    stream = LogSensorStream(smap, log)
    assert bool(stream) is True
    first = list(stream)
    assert first == list(log)
    assert bool(stream) is False
    assert list(stream) == []
    assert stream.rewind() is True
    assert list(stream) == first


def test_log_stream_needs_log():
    with pytest.raises(ValueError):
        LogSensorStream({}, None)