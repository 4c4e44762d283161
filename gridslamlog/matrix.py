"""Dense matrices with determinant, inverse and the basic arithmetic."""

from __future__ import annotations


class NotInvertibleMatrixError(ValueError):
    """The matrix is singular or not square, so it has no inverse."""


class IncompatibleMatrixError(ValueError):
    """The shapes of the operands do not fit the operation."""


class NotSquareMatrixError(ValueError):
    """The operation needs a square matrix."""


class Matrix:
    """A rows x columns matrix; both sizes are at least one.

    Elements are read and written as ``m[i, j]``; ``m[i]`` gives row i as a tuple.
    """

    def __init__(self, n: int = 0, m: int = 0, values=None) -> None:
        self._nrows = max(n, 1)
        self._ncols = max(m, 1)
        self._data = [[0.0] * self._ncols for _ in range(self._nrows)]
        if values is not None:
            rows = [list(row) for row in values]
            if len(rows) != self._nrows or any(len(row) != self._ncols for row in rows):
                raise IncompatibleMatrixError("values do not match the matrix shape")
            self._data = rows

    @property
    def rows(self) -> int:
        return self._nrows

    @property
    def columns(self) -> int:
        return self._ncols

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """The n x n identity matrix."""
        result = cls(n, n)
        for i in range(result.rows):
            result._data[i][i] = 1.0
        return result

    def _copy_rows(self) -> list[list]:
        return [list(row) for row in self._data]

    def _square(self) -> bool:
        return self._nrows == self._ncols

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self._data[i][j]
        return tuple(self._data[index])

    def __setitem__(self, index, value) -> None:
        i, j = index
        self._data[i][j] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix({self._nrows}, {self._ncols}, {self._data!r})"

    def __str__(self) -> str:
        body = ",".join(
            "{" + ",".join(format(v, "g") for v in row) + "}" for row in self._data
        )
        return "{" + body + "}"

    def det(self):
        """The determinant, by Gaussian elimination with row pivoting."""
        if not self._square():
            raise NotSquareMatrixError("determinant of a non-square matrix")
        a = self._copy_rows()
        n = self._nrows
        d = 1.0
        for i in range(n):
            k = next((k for k in range(i, n) if a[k][i] != 0), None)
            if k is None:
                return 0.0
            val = a[k][i]
            a[k] = [v / val for v in a[k]]
            d = d * val
            if k != i:
                a[k], a[i] = a[i], a[k]
                d = -d
            for j in range(i + 1, n):
                tmp = a[j][i]
                if tmp != 0:
                    a[j] = [vj - tmp * vi for vj, vi in zip(a[j], a[i])]
        return d

    def inv(self) -> Matrix:
        """The inverse, by Gauss-Jordan elimination."""
        if not self._square():
            raise NotInvertibleMatrixError("inverse of a non-square matrix")
        n = self._nrows
        a = self._copy_rows()
        b = Matrix.identity(n)._copy_rows()
        for i in range(n):
            k = next((k for k in range(i, n) if a[k][i] != 0), None)
            if k is None:
                raise NotInvertibleMatrixError("matrix is singular")
            val = a[k][i]
            a[k] = [v / val for v in a[k]]
            b[k] = [v / val for v in b[k]]
            if k != i:
                a[k], a[i] = a[i], a[k]
                b[k], b[i] = b[i], b[k]
            for j in range(n):
                if j != i:
                    tmp = a[j][i]
                    a[j] = [vj - tmp * vi for vj, vi in zip(a[j], a[i])]
                    b[j] = [vj - tmp * vi for vj, vi in zip(b[j], b[i])]
        return Matrix(n, n, b)

    def transpose(self) -> Matrix:
        return Matrix(self._ncols, self._nrows, [list(col) for col in zip(*self._data)])

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self._ncols != other._nrows:
                raise IncompatibleMatrixError("inner dimensions differ")
            cols = list(zip(*other._data))
            values = [
                [sum(x * y for x, y in zip(row, col)) for col in cols] for row in self._data
            ]
            return Matrix(self._nrows, other._ncols, values)
        return Matrix(self._nrows, self._ncols, [[v * other for v in row] for row in self._data])

    def __rmul__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        return self * other

    def _elementwise(self, other: Matrix, op) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._nrows != other._nrows or self._ncols != other._ncols:
            raise IncompatibleMatrixError("matrix shapes differ")
        values = [[op(x, y) for x, y in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        return Matrix(self._nrows, self._ncols, values)

    def __add__(self, other):
        return self._elementwise(other, lambda x, y: x + y)

    def __sub__(self, other):
        return self._elementwise(other, lambda x, y: x - y)