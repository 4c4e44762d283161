"""Command-line tools working on CARMEN logs: conversion, plotting and dumping."""

from __future__ import annotations

import math
import sys

from gridslamlog.configuration import CarmenConfiguration
from gridslamlog.sensorlog import SensorLog
from gridslamlog.sensors import RangeReading

_MAX_READINGS = 10240


def _fmt(value: float) -> str:
    return "%g" % value


def load_log(path) -> SensorLog:
    """Read the configuration of a CARMEN log and then all its readings."""
    config = CarmenConfiguration()
    with open(path) as stream:
        config.load(stream)
    log = SensorLog(config.compute_sensor_map())
    with open(path) as stream:
        log.load(stream)
    return log


def _scans(log):
    return (r for r in log if isinstance(r, RangeReading))


def rdk_lines(log):
    """Each scan as 'name size ranges x y theta', lengths scaled from millimetres to metres."""
    for rr in _scans(log):
        parts = [rr.sensor.name, str(len(rr))]
        parts.extend(_fmt(v * 0.001) for v in rr)
        parts.extend([_fmt(rr.pose.x * 0.001), _fmt(rr.pose.y * 0.001), _fmt(rr.pose.theta)])
        yield " ".join(parts)


def convert_scanstudio(lines):
    """Turn ScanStudio scan records into CARMEN FLASER lines."""
    source = iter(lines)
    pending: list[list[str]] = []

    def next_tokens():
        if pending:
            return pending.pop(0)
        line = next(source, None)
        return None if line is None else line.split()

    x = y = theta = 0.0
    nbeams = 0
    while (tokens := next_tokens()) is not None:
        if not tokens:
            continue
        head = tokens[0]
        if head == "RobotPos:":
            values = [float(v) for v in tokens[1:4]]
            if len(values) > 0:
                x = values[0] / 1000
            if len(values) > 1:
                y = values[1] / 1000
            if len(values) > 2:
                theta = values[2]
        elif head == "NumPoints:":
            if len(tokens) > 1:
                nbeams = int(tokens[1])
            if nbeams >= _MAX_READINGS:
                raise ValueError(f"too many points in a scan: {nbeams}")
        elif head == "DATA":
            values: list[str] = []
            while len(values) < 2 * nbeams:
                more = next_tokens()
                if more is None:
                    break
                values.extend(more)
            leftover = values[2 * nbeams:]
            if leftover:
                pending.append(leftover)
            readings = [float(v) / 1000 for v in values[1:2 * nbeams:2]]
            parts = []
            if len(readings) == nbeams:
                parts += ["FLASER", str(nbeams)]
            parts.extend(_fmt(r) for r in readings)
            parts.extend([_fmt(x), _fmt(y), _fmt(theta), "0", "0", "0", "0", "pippo", "0"])
            yield " ".join(parts)


def plot_frames(log, max_range: float = 2.0):
    """Gnuplot commands drawing every third scan into its own GIF frame."""
    count = 0
    frame = 0
    for rr in _scans(log):
        count += 1
        if count % 3:
            continue
        points = [
            (r * beam.c, r * beam.s)
            for r, beam in zip(rr.ranges, rr.sensor.beams)
            if r <= max_range
        ]
        if not points:
            continue
        yield "set terminal gif"
        yield 'set output "frame-%05d.gif"' % frame
        frame += 1
        yield "set size ratio -1"
        yield "plot [-3:3][0:3] '-' w p ps 1"
        for px, py in points:
            yield f"{_fmt(py)} {_fmt(px)}"
        yield "e"


def pose_lines(log):
    """Each scan as 'x y theta time'."""
    for rr in _scans(log):
        yield " ".join(_fmt(v) for v in (rr.pose.x, rr.pose.y, rr.pose.theta, rr.time))


def _open_log(path):
    try:
        return load_log(path)
    except OSError:
        return None


def rdk2carmen_main(argv=None) -> int:
    """Convert the scans of a log to plain range lines, to a file or standard output."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print("usage rdk2carmen <filename> <outfilename>", file=sys.stderr)
        print("or rdk2carmen <filename> for standard output", file=sys.stderr)
        return 1
    log = _open_log(argv[0])
    if log is None:
        print(f"no file {argv[0]} found", file=sys.stderr)
        return 1
    print(f"log size{len(log)}", file=sys.stderr)
    if len(argv) < 2:
        for line in rdk_lines(log):
            print(line)
        return 0
    try:
        with open(argv[1], "w") as out:
            for line in rdk_lines(log):
                out.write(line + "\n")
    except OSError:
        print(f"cannot write {argv[1]}", file=sys.stderr)
        return 1
    return 0


def scanstudio2carmen_main(argv=None) -> int:
    """Convert a ScanStudio scan file into a CARMEN log."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if len(argv) < 2:
        print("usage scanstudio2carmen scanfilename carmenfilename")
        return 1
    try:
        source = open(argv[0])
    except OSError:
        print(f"cannot open file{argv[0]}")
        return 1
    with source, open(argv[1], "w") as out:
        for line in convert_scanstudio(source):
            out.write(line + "\n")
    return 0


def log_plot_main(argv=None) -> int:
    """Print gnuplot commands that draw the scans of a log."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print("usage log_plot <filename> | gnuplot")
        return 1
    log = _open_log(argv[0])
    if log is None:
        print(f"no file {argv[0]} found")
        return 1
    print(f"log size{len(log)}", file=sys.stderr)
    for line in plot_frames(log, 2.0):
        print(line)
    return 0


def log_test_main(argv=None) -> int:
    """Print the pose and time of every scan of a log."""
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print("usage log_test <filename>")
        return 1
    log = _open_log(argv[0])
    if log is None:
        print(f"no file {argv[0]} found")
        return 1
    print(f"log size{len(log)}", file=sys.stderr)
    for line in pose_lines(log):
        print(line)
    return 0