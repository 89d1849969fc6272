## 4x4 homogeneous transforms for the funcsurf viewer
## (rotation composition for the surface model)

## Copyright (c) 2025 funcsurf contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from math import cos, sin, radians, isfinite

from funcsurf.geometry_utils import mag3, epsilon

## a matrix is a list of four rows of four numbers.  Vectors are
## treated as columns, so A.mul(B) applied to v is A(Bv): B acts first.


def _isgoodnum(x):
    return (not isinstance(x, bool)) and isinstance(x, (int, float)) and isfinite(x)


class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, Matrix):
            self.m = [list(row) for row in a.m]
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                values = [x for r in a for x in r]
            elif len(a) == 16:
                values = list(a)
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
            for ind, x in enumerate(values):
                if not _isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[ind // 4][ind % 4] = float(x)
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(*self.m)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a 3- or
    # 4-vector, compute Mx (a 3-vector is lifted to a point, w=1).
    def mul(self, x):
        if isinstance(x, Matrix):
            return Matrix([[sum(self.m[i][k] * x.m[k][j] for k in range(4))
                            for j in range(4)]
                           for i in range(4)])
        if isinstance(x, (tuple, list)) and len(x) in (3, 4):
            v = list(x) + [1.0] if len(x) == 3 else list(x)
            return [sum(self.m[i][k] * v[k] for k in range(4)) for i in range(4)]

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def column_major(self):
        """flatten in the column-major order OpenGL uniforms expect"""
        return tuple(self.m[i][j] for j in range(4) for i in range(4))


# return the 4x4 rotation matrix for ``angle`` degrees about ``axis``
# (right-handed, counter-clockwise looking down the axis)
def Rotation(axis, angle, inverse=False):
    m = mag3(axis)
    if m < epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    ux = axis[0] / m
    uy = axis[1] / m
    uz = axis[2] / m

    if inverse:
        angle = -angle
    rad = radians(angle % 360.0)

    cang = cos(rad)
    cmin = 1.0 - cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0.0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0.0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0.0],
         [0.0, 0.0, 0.0, 1.0]]

    return Matrix(R)


def Translation(delta, inverse=False):
    dx, dy, dz = delta[0], delta[1], delta[2]
    if inverse:
        dx, dy, dz = -dx, -dy, -dz
    return Matrix([[1.0, 0.0, 0.0, dx],
                   [0.0, 1.0, 0.0, dy],
                   [0.0, 0.0, 1.0, dz],
                   [0.0, 0.0, 0.0, 1.0]])


## fixed axes of the display volume
XAXIS = (1.0, 0.0, 0.0)
YAXIS = (0.0, 1.0, 0.0)
