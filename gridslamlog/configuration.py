"""Robot configuration read from the parameter section of a CARMEN log."""

from __future__ import annotations

import abc
import logging
import math
import re
from itertools import islice

from gridslamlog.geometry import OrientedPoint
from gridslamlog.sensors import Beam, OdometrySensor, RangeSensor, Sensor

_log = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

_HOKUYO_RESOLUTION = 360.0 / 1024.0

# beam count -> (resolution in degrees, maximum range or None for the default)
_COMMON_LAYOUTS = {
    180: (1.0, None),
    181: (1.0, None),
    360: (0.5, None),
    361: (0.5, None),
    540: (0.5, None),
    541: (0.5, None),
}
_FRONT_LAYOUTS = {
    **_COMMON_LAYOUTS,
    769: (_HOKUYO_RESOLUTION, 4.1),
    682: (_HOKUYO_RESOLUTION, 4.1),
    683: (_HOKUYO_RESOLUTION, 5.5),
}
_ROBOT_FRONT_LAYOUTS = {
    **_COMMON_LAYOUTS,
    769: (_HOKUYO_RESOLUTION, None),
    683: (_HOKUYO_RESOLUTION, 5.5),
}
_REAR_LAYOUTS = {
    **_COMMON_LAYOUTS,
    769: (_HOKUYO_RESOLUTION, None),
}


def _atof(text: str) -> float:
    """Leading number of text, or 0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _atoi(text: str) -> int:
    """Leading integer of text, or 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _laser_beams(beam_no: int, resolution: float, max_range: float) -> list[Beam]:
    """Beams laid out symmetrically around the sensor's heading."""
    beams: list[Beam | None] = [None] * beam_no
    step = resolution * math.pi / 180.0
    low = beam_no // 2
    up = (beam_no + 1) // 2
    odd = beam_no % 2 == 1
    angle = 0.0 if odd else step
    for i in range(0 if odd else 1, low + 1):
        beams[low - i] = Beam(pose=OrientedPoint(0.0, 0.0, -angle), span=0.0, max_range=max_range)
        beams[up + i - 1] = Beam(pose=OrientedPoint(0.0, 0.0, angle), span=0.0, max_range=max_range)
        angle += step
    return beams


class Configuration(abc.ABC):
    """Something that knows which sensors a robot carries."""

    @abc.abstractmethod
    def compute_sensor_map(self) -> dict[str, Sensor]:
        """The sensors of the robot, by name."""


class CarmenConfiguration(Configuration, dict):
    """Parameters of a CARMEN log: each name maps to its list of string values."""

    def load(self, stream) -> None:
        """Read PARAM lines and laser beam counts from an iterable of log lines."""
        self.clear()
        front_seen = rear_seen = False
        beams = rbeams = ""
        for line in stream:
            tokens = line.split()
            if not tokens:
                continue
            qualifier, rest = tokens[0], tokens[1:]
            if qualifier == "FLASER":
                front_seen = True
                if rest:
                    beams = rest[0]
            elif qualifier == "RLASER":
                rear_seen = True
                if rest:
                    rbeams = rest[0]
            elif qualifier == "ROBOTLASER1":
                front_seen = True
                if len(rest) > 7:
                    beams = rest[7]
            elif qualifier == "ROBOTLASER2":
                rear_seen = True
                if len(rest) > 7:
                    rbeams = rest[7]
            elif qualifier == "PARAM" and rest:
                self.setdefault(rest[0], rest[1:])
        if front_seen:
            self.setdefault("laser_beams", [beams])
            self.setdefault("robot_use_laser", ["on"])
            _log.debug("front laser beams from log: %s", beams)
        if rear_seen:
            self.setdefault("rear_laser_beams", [rbeams])
            self.setdefault("robot_use_rear_laser", ["on"])
            _log.debug("rear laser beams from log: %s", rbeams)

    def _value(self, key: str) -> str | None:
        values = self.get(key)
        return values[0] if values else None

    def _is_on(self, key: str) -> bool:
        return self._value(key) == "on"

    def _count(self, key: str, default: int) -> int:
        value = self._value(key)
        count = default if value is None else _atoi(value)
        if count < 0:
            raise ValueError(f"negative count for {key}: {value}")
        return count

    def _number(self, key: str, default: float) -> float:
        value = self._value(key)
        return default if value is None else _atof(value)

    def _layout(self, layouts, beam_no: int, default_range: float, resolution_key: str):
        if beam_no in layouts:
            resolution, max_range = layouts[beam_no]
            return resolution, default_range if max_range is None else max_range
        return self._number(resolution_key, 1.0), default_range

    def _laser(self, name, pose, beam_key, layouts, default_range, resolution_key, new_format):
        beam_no = self._count(beam_key, 180)
        resolution, max_range = self._layout(layouts, beam_no, default_range, resolution_key)
        sensor = RangeSensor(
            name,
            pose=pose,
            beams=_laser_beams(beam_no, resolution, max_range),
            new_format=new_format,
        )
        sensor.update_beams_lookup()
        _log.debug("%s: %d beams, max range %g", name, beam_no, max_range)
        return sensor

    def _sonar(self) -> RangeSensor:
        max_range = self._number("robot_max_sonar", 10.0)
        sonar_num = self._count("robot_num_sonars", 0)
        beams = []
        offsets = self.get("robot_sonar_offsets")
        if offsets is not None:
            if len(offsets) // 3 < sonar_num:
                raise ValueError(
                    f"{len(offsets)} parameters for the sonar offsets while "
                    f"{sonar_num} sonars need at least {sonar_num * 3}"
                )
            triples = zip(*[iter(offsets)] * 3)
            for x, y, theta in islice(triples, sonar_num):
                beams.append(
                    Beam(
                        pose=OrientedPoint(_atof(x), _atof(y), _atof(theta)),
                        span=math.pi / 180.0 * 7.5,
                        max_range=max_range,
                    )
                )
        sonar = RangeSensor("SONAR", pose=OrientedPoint(), beams=beams)
        sonar.update_beams_lookup()
        return sonar

    def compute_sensor_map(self) -> dict[str, Sensor]:
        """Build the odometry, sonar and laser sensors described by the parameters."""
        sensors: dict[str, Sensor] = {
            "ODOM": OdometrySensor("ODOM"),
            "TRUEPOS": OdometrySensor("TRUEPOS", ideal=True),
        }
        if self._is_on("robot_use_sonar"):
            sensors["SONAR"] = self._sonar()

        if self._is_on("robot_use_laser"):
            front_x = self._number("robot_frontlaser_offset", 0.0)
            front_pose = OrientedPoint(front_x, 0.0, 0.0)
            sensors["FLASER"] = self._laser(
                "FLASER", front_pose, "laser_beams", _FRONT_LAYOUTS, 50.0,
                "laser_front_laser_resolution", False,
            )
            sensors["ROBOTLASER1"] = self._laser(
                "ROBOTLASER1", front_pose, "laser_beams", _ROBOT_FRONT_LAYOUTS, 50.0,
                "laser_front_laser_resolution", True,
            )

        if self._is_on("robot_use_rear_laser"):
            rear_x = self._number("robot_rearlaser_offset", 0.0)
            sensors["RLASER"] = self._laser(
                "RLASER", OrientedPoint(rear_x, 0.0, math.pi), "rear_laser_beams",
                _REAR_LAYOUTS, 89.0, "laser_rear_laser_resolution", False,
            )
            sensors["ROBOTLASER2"] = self._laser(
                "ROBOTLASER2", OrientedPoint(0.0, 0.0, math.pi), "rear_laser_beams",
                _REAR_LAYOUTS, 50.0, "laser_rear_laser_resolution", True,
            )
        return dict(sorted(sensors.items()))