"""Closed-form rigid alignment of two matched point sets."""

from __future__ import annotations

import math

from gridslamlog.geometry import OrientedPoint


def lu_milios_step(src, dest) -> OrientedPoint:
    """The rigid transform (translation and rotation) that best maps src onto dest."""
    src = list(src)
    dest = list(dest)
    if len(src) != len(dest):
        raise ValueError("point sets differ in size")
    if not src:
        raise ValueError("no points to align")
    n = len(src)
    smx = sum(p.x for p in src) / n
    smy = sum(p.y for p in src) / n
    dmx = sum(p.x for p in dest) / n
    dmy = sum(p.y for p in dest) / n

    sxx = sxy = syx = syy = 0.0
    for s, d in zip(src, dest):
        sx, sy = s.x - smx, s.y - smy
        dx, dy = d.x - dmx, d.y - dmy
        sxx += sx * dx
        sxy += sx * dy
        syx += sy * dx
        syy += sy * dy
    omega = math.atan2(sxy - syx, sxx + syy)
    c, s = math.cos(omega), math.sin(omega)
    return OrientedPoint(dmx - (smx * c - smy * s), dmy - (smx * s + smy * c), omega)