"""Cells of a grid crossed by a straight line (Bresenham)."""

from __future__ import annotations


def grid_line_core(start, end) -> list[tuple[int, int]]:
    """Cells from one end point to the other, walked along the major axis in increasing order."""
    sx, sy = (int(v) for v in start)
    ex, ey = (int(v) for v in end)
    dx, dy = abs(ex - sx), abs(ey - sy)

    if dy <= dx:
        d, incr1, incr2 = 2 * dy - dx, 2 * dy, 2 * (dy - dx)
        if sx > ex:
            x, y, ydir, xend = ex, ey, -1, sx
        else:
            x, y, ydir, xend = sx, sy, 1, ex
        ystep = 1 if (ey - sy) * ydir > 0 else -1
        points = [(x, y)]
        while x < xend:
            x += 1
            if d < 0:
                d += incr1
            else:
                y += ystep
                d += incr2
            points.append((x, y))
        return points

    d, incr1, incr2 = 2 * dx - dy, 2 * dx, 2 * (dx - dy)
    if sy > ey:
        x, y, xdir, yend = ex, ey, -1, sy
    else:
        x, y, xdir, yend = sx, sy, 1, ey
    xstep = 1 if (ex - sx) * xdir > 0 else -1
    points = [(x, y)]
    while y < yend:
        y += 1
        if d < 0:
            d += incr1
        else:
            x += xstep
            d += incr2
        points.append((x, y))
    return points


def grid_line(start, end) -> list[tuple[int, int]]:
    """Cells from start to end, always beginning at start."""
    points = grid_line_core(start, end)
    if points[0] != (int(start[0]), int(start[1])):
        points.reverse()
    return points