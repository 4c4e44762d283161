import pytest

from gridslamlog.matrix import (
    IncompatibleMatrixError,
    Matrix,
    NotInvertibleMatrixError,
    NotSquareMatrixError,
)


def _m(rows):
    return Matrix(len(rows), len(rows[0]), rows)


def _flat(m):
    return [m[i, j] for i in range(m.rows) for j in range(m.columns)]


IDENTITY3 = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]

A = [[4.0, 7.0, 2.0], [3.0, 6.0, 1.0], [2.0, 5.0, 3.0]]
B = [[1.0, 2.0, 0.0], [0.0, 1.0, 5.0], [2.0, 0.0, 1.0]]


def test_sizes_are_at_least_one():
    m = Matrix()
    assert (m.rows, m.columns) == (1, 1)
    assert m[0, 0] == 0


def test_identity_det_and_inverse():
    ident = Matrix.identity(3)
    assert ident.det() == 1.0
    assert ident.inv() == ident


def test_inverse_round_trip():
    a = _m(A)
    right = a * a.inv()
    left = a.inv() * a
    assert (right.rows, right.columns) == (3, 3)
    assert (left.rows, left.columns) == (3, 3)
    assert _flat(right) == pytest.approx(IDENTITY3, abs=1e-9)
    assert _flat(left) == pytest.approx(IDENTITY3, abs=1e-9)


def test_inverse_needs_row_swap():
    a = _m([[0.0, 1.0], [1.0, 0.0]])
    inverse = a.inv()
    assert (inverse.rows, inverse.columns) == (2, 2)
    assert _flat(inverse) == pytest.approx([0.0, 1.0, 1.0, 0.0], abs=1e-9)


def test_det_of_diagonal():
    assert _m([[2.0, 0.0], [0.0, 3.0]]).det() == pytest.approx(6.0)


def test_det_is_multiplicative():
    a, b = _m(A), _m(B)
    assert (a * b).det() == pytest.approx(a.det() * b.det())


def test_det_sign_flips_with_row_swap():
    a = _m(A)
    swapped = _m([A[1], A[0], A[2]])
    assert swapped.det() == pytest.approx(-a.det())


def test_singular_matrix():
    s = _m([[1.0, 2.0], [2.0, 4.0]])
    assert s.det() == 0.0
    with pytest.raises(NotInvertibleMatrixError):
        s.inv()


def test_non_square_errors():
    r = Matrix(2, 3)
    with pytest.raises(NotSquareMatrixError):
        r.det()
    with pytest.raises(NotInvertibleMatrixError):
        r.inv()


def test_transpose():
    r = _m([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    t = r.transpose()
    assert (t.rows, t.columns) == (3, 2)
    assert t[2, 0] == r[0, 2]
    assert t.transpose() == r


def test_add_sub_scalar():
    a, b = _m(A), _m(B)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_incompatible_shapes():
    with pytest.raises(IncompatibleMatrixError):
        Matrix(2, 3) * Matrix(2, 3)
    with pytest.raises(IncompatibleMatrixError):
        Matrix(2, 2) + Matrix(3, 3)
    with pytest.raises(IncompatibleMatrixError):
        Matrix(2, 2) - Matrix(2, 3)


def test_item_access():
    m = Matrix(2, 2)
    m[1, 0] = 5.0
    assert m[1] == (5.0, 0.0)
    assert m[1, 0] == 5.0


def test_str_format():
    assert str(Matrix.identity(2)) == "{{1,0},{0,1}}"