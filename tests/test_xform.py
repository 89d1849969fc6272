import pytest

from funcsurf.xform import XAXIS, YAXIS, Matrix, Rotation, Translation


class TestXform:
    """unit tests for funcsurf matrix operations"""

    def test_matrix(self):
        foo = Matrix([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16])
        bar = Matrix([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1], [0, 0, 0, 1]])
        I = Matrix()
        assert I.mul(bar) == bar
        assert I.mul(foo) == foo
        assert foo.mul(bar).m == [[1, 2, 3, 10], [5, 6, 7, 26], [9, 10, 11, 42], [13, 14, 15, 58]]
        assert foo.mul([1, 2, 3, 1]) == [18, 46, 74, 102]
        assert foo.mul((1, 2, 3)) == [18, 46, 74, 102]

    def test_bad_initializers(self):
        with pytest.raises(ValueError):
            Matrix([1, 2, 3])
        with pytest.raises(ValueError):
            Matrix([True] * 16)
        with pytest.raises(ValueError):
            Matrix([float('nan')] * 16)
        with pytest.raises(ValueError):
            Matrix().mul("nope")

    def test_rows_and_columns(self):
        foo = Matrix(list(range(16)))
        assert foo.getrow(1) == [4, 5, 6, 7]
        assert foo.getcol(2) == [2, 6, 10, 14]
        assert foo.get(3, 0) == 12
        with pytest.raises(ValueError):
            foo.get(4, 0)
        assert foo.column_major()[:4] == (0, 4, 8, 12)

    def test_rotation(self):
        r = Rotation(YAXIS, 90)
        assert r.mul((1, 0, 0))[:3] == pytest.approx([0, 0, -1], abs=1e-12)
        r = Rotation(XAXIS, 90)
        assert r.mul((0, 1, 0))[:3] == pytest.approx([0, 0, 1], abs=1e-12)
        r = Rotation((0, 0, 2), 90)
        assert r.mul((1, 0, 0))[:3] == pytest.approx([0, 1, 0], abs=1e-12)

    def test_rotation_inverse_and_periodicity(self):
        fwd = Rotation(YAXIS, 37)
        back = Rotation(YAXIS, 37, inverse=True)
        assert fwd.mul(back).column_major() == pytest.approx(Matrix().column_major(), abs=1e-12)
        assert Rotation(XAXIS, 400).column_major() == pytest.approx(
            Rotation(XAXIS, 40).column_major(), abs=1e-12)

    def test_zero_axis(self):
        with pytest.raises(ValueError):
            Rotation((0, 0, 0), 10)

    def test_translation(self):
        t = Translation((1, 2, 3))
        assert t.mul((0, 0, 0)) == [1, 2, 3, 1]
        assert Translation((1, 2, 3), inverse=True).mul((1, 2, 3)) == [0, 0, 0, 1]
