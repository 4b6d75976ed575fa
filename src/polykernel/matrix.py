## homogeneous transformation matrices for polykernel

## Copyright (c) 2026 polykernel contributors
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

"""Square transformation matrices.

Matrices are stored as a list of rows and act on column vectors:
transforming ``v`` computes ``M v``.  Determinants, inverses and products are delegated to numpy.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from polykernel.tolerance import EPS, is_equal, is_zero

__all__ = ["Matrix3x3", "Matrix4x4"]


class _SquareMatrix:
    size = 0

    def __init__(self, values: Optional[Sequence] = None):
        n = self.size
        self.m = [[0.0] * n for _ in range(n)]
        if values is None:
            return
        if isinstance(values, _SquareMatrix):
            values = values.m
        if len(values) == n and all(isinstance(r, (list, tuple)) for r in values):
            rows = values
        elif len(values) == n * n:
            rows = [values[i * n:(i + 1) * n] for i in range(n)]
        else:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(values))
        for i in range(n):
            if len(rows[i]) != n:
                raise ValueError('bad row in matrix initialization: {}'.format(rows[i]))
            for j in range(n):
                x = rows[i][j]
                if isinstance(x, bool) or not isinstance(x, (int, float)):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[i][j] = float(x)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.m)

    def _check(self, i, name):
        if i < 0 or i >= self.size:
            raise ValueError('bad index passed to {}: {}'.format(name, i))

    def get(self, i, j):
        self._check(i, 'get')
        self._check(j, 'get')
        return self.m[i][j]

    def set(self, i, j, x):
        self._check(i, 'set')
        self._check(j, 'set')
        self.m[i][j] = float(x)

    def __getitem__(self, index):
        i, j = index
        return self.get(i, j)

    def __setitem__(self, index, x):
        i, j = index
        self.set(i, j, x)

    def getrow(self, i):
        self._check(i, 'getrow')
        return list(self.m[i])

    def getcol(self, j):
        self._check(j, 'getcol')
        return [row[j] for row in self.m]

    def __eq__(self, ref):
        if not isinstance(ref, type(self)):
            return NotImplemented
        return all(is_equal(self.m[i][j], ref.m[i][j])
                   for i in range(self.size) for j in range(self.size))

    def __ne__(self, ref):
        result = self.__eq__(ref)
        return result if result is NotImplemented else not result

    __hash__ = None

    def array(self) -> np.ndarray:
        return np.array(self.m, dtype=float)

    @classmethod
    def _from_array(cls, arr):
        result = cls()
        result.m = [[float(x) for x in row] for row in arr]
        return result

    def __mul__(self, ref):
        if isinstance(ref, type(self)):
            return self._from_array(self.array() @ ref.array())
        if isinstance(ref, (int, float)) and not isinstance(ref, bool):
            return self._from_array(self.array() * ref)
        return NotImplemented

    def apply(self, values: Sequence[float]) -> list:
        """Return the column vector ``M v`` for a vector of matching size."""
        if len(values) != self.size:
            raise ValueError('vector size does not match matrix: {}'.format(values))
        return [sum(values[col] * self.m[row][col] for col in range(self.size))
                for row in range(self.size)]

    def determinant(self) -> float:
        return float(np.linalg.det(self.array()))

    def inverse(self, prec: float = EPS):
        """Return the inverse matrix, or ``None`` if the matrix is singular."""
        if is_zero(self.determinant(), prec):
            return None
        return self._from_array(np.linalg.inv(self.array()))

    @classmethod
    def create_identity(cls):
        return cls._from_array(np.identity(cls.size))


class Matrix3x3(_SquareMatrix):
    """3x3 matrix for linear transforms of 3D coordinates."""

    size = 3

    @classmethod
    def create_x_rotate(cls, angle):
        c, s = math.cos(angle), math.sin(angle)
        return cls([[1.0, 0.0, 0.0],
                    [0.0, c, -s],
                    [0.0, s, c]])

    @classmethod
    def create_y_rotate(cls, angle):
        c, s = math.cos(angle), math.sin(angle)
        return cls([[c, 0.0, s],
                    [0.0, 1.0, 0.0],
                    [-s, 0.0, c]])

    @classmethod
    def create_z_rotate(cls, angle):
        c, s = math.cos(angle), math.sin(angle)
        return cls([[c, -s, 0.0],
                    [s, c, 0.0],
                    [0.0, 0.0, 1.0]])

    @classmethod
    def create_scale(cls, x, y, z=1.0):
        return cls([[x, 0.0, 0.0],
                    [0.0, y, 0.0],
                    [0.0, 0.0, z]])

    @classmethod
    def create_translate(cls, x, y):
        """2D translation in homogeneous form; acts on vectors ``(x, y, 1)``."""
        return cls([[1.0, 0.0, x],
                    [0.0, 1.0, y],
                    [0.0, 0.0, 1.0]])


class Matrix4x4(_SquareMatrix):
    """4x4 matrix for affine transforms of homogeneous 3D coordinates."""

    size = 4

    @classmethod
    def create_x_rotate(cls, angle):
        c, s = math.cos(angle), math.sin(angle)
        return cls([[1.0, 0.0, 0.0, 0.0],
                    [0.0, c, -s, 0.0],
                    [0.0, s, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def create_y_rotate(cls, angle):
        c, s = math.cos(angle), math.sin(angle)
        return cls([[c, 0.0, s, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [-s, 0.0, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def create_z_rotate(cls, angle):
        c, s = math.cos(angle), math.sin(angle)
        return cls([[c, -s, 0.0, 0.0],
                    [s, c, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def create_scale(cls, x, y, z):
        return cls([[x, 0.0, 0.0, 0.0],
                    [0.0, y, 0.0, 0.0],
                    [0.0, 0.0, z, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def create_translate(cls, x, y, z):
        return cls([[1.0, 0.0, 0.0, x],
                    [0.0, 1.0, 0.0, y],
                    [0.0, 0.0, 1.0, z],
                    [0.0, 0.0, 0.0, 1.0]])
