"""Eigen-decomposition of symmetric 3x3 real matrices (Householder + QL)."""

from __future__ import annotations

import math

_N = 3


def _hypot2(x: float, y: float) -> float:
    return math.sqrt(x * x + y * y)


def _tred2(V, d, e) -> None:
    n = _N
    for j in range(n):
        d[j] = V[n - 1][j]

    for i in range(n - 1, 0, -1):
        scale = sum(abs(d[k]) for k in range(i))
        h = 0.0
        if scale == 0.0:
            e[i] = d[i - 1]
            for j in range(i):
                d[j] = V[i - 1][j]
                V[i][j] = 0.0
                V[j][i] = 0.0
        else:
            for k in range(i):
                d[k] /= scale
                h += d[k] * d[k]
            f = d[i - 1]
            g = math.sqrt(h)
            if f > 0:
                g = -g
            e[i] = scale * g
            h -= f * g
            d[i - 1] = f - g
            for j in range(i):
                e[j] = 0.0
            for j in range(i):
                f = d[j]
                V[j][i] = f
                g = e[j] + V[j][j] * f
                for k in range(j + 1, i):
                    g += V[k][j] * d[k]
                    e[k] += V[k][j] * f
                e[j] = g
            f = 0.0
            for j in range(i):
                e[j] /= h
                f += e[j] * d[j]
            hh = f / (h + h)
            for j in range(i):
                e[j] -= hh * d[j]
            for j in range(i):
                f = d[j]
                g = e[j]
                for k in range(j, i):
                    V[k][j] -= f * e[k] + g * d[k]
                d[j] = V[i - 1][j]
                V[i][j] = 0.0
        d[i] = h

    for i in range(n - 1):
        V[n - 1][i] = V[i][i]
        V[i][i] = 1.0
        h = d[i + 1]
        if h != 0.0:
            for k in range(i + 1):
                d[k] = V[k][i + 1] / h
            for j in range(i + 1):
                g = sum(V[k][i + 1] * V[k][j] for k in range(i + 1))
                for k in range(i + 1):
                    V[k][j] -= g * d[k]
        for k in range(i + 1):
            V[k][i + 1] = 0.0
    for j in range(n):
        d[j] = V[n - 1][j]
        V[n - 1][j] = 0.0
    V[n - 1][n - 1] = 1.0
    e[0] = 0.0


def _tql2(V, d, e) -> None:
    n = _N
    for i in range(1, n):
        e[i - 1] = e[i]
    e[n - 1] = 0.0

    f = 0.0
    tst1 = 0.0
    eps = 2.0 ** -52
    for l in range(n):
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        m = l
        while m < n and abs(e[m]) > eps * tst1:
            m += 1

        if m > l:
            while True:
                g = d[l]
                p = (d[l + 1] - g) / (2.0 * e[l])
                r = _hypot2(p, 1.0)
                if p < 0:
                    r = -r
                d[l] = e[l] / (p + r)
                d[l + 1] = e[l] * (p + r)
                dl1 = d[l + 1]
                h = g - d[l]
                for i in range(l + 2, n):
                    d[i] -= h
                f += h

                p = d[m]
                c = c2 = c3 = 1.0
                el1 = e[l + 1]
                s = s2 = 0.0
                for i in range(m - 1, l - 1, -1):
                    c3 = c2
                    c2 = c
                    s2 = s
                    g = c * e[i]
                    h = c * p
                    r = _hypot2(p, e[i])
                    e[i + 1] = s * r
                    s = e[i] / r
                    c = p / r
                    p = c * d[i] - s * g
                    d[i + 1] = h + s * (c * g + s * d[i])
                    for row in V:
                        h = row[i + 1]
                        row[i + 1] = s * row[i] + c * h
                        row[i] = c * row[i] - s * h
                p = -s * s2 * c3 * el1 * e[l] / dl1
                e[l] = s * p
                d[l] = c * p
                if abs(e[l]) <= eps * tst1:
                    break
        d[l] += f
        e[l] = 0.0

    for i in range(n - 1):
        k = min(range(i, n), key=lambda j: (d[j], j))
        if d[k] < d[i]:
            d[i], d[k] = d[k], d[i]
            for row in V:
                row[i], row[k] = row[k], row[i]


def eigen_decomposition(matrix) -> tuple[list[list[float]], list[float]]:
    """Decompose a symmetric 3x3 matrix.

    Returns (V, d): the eigenvectors as the columns of V and the matching
    eigenvalues in d, in ascending order.
    """
    rows = [list(map(float, row)) for row in matrix]
    if len(rows) != _N or any(len(row) != _N for row in rows):
        raise ValueError("eigen_decomposition needs a 3x3 matrix")
    d = [0.0] * _N
    e = [0.0] * _N
    _tred2(rows, d, e)
    _tql2(rows, d, e)
    return rows, d