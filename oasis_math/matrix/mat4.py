################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""4x4 column-major matrix."""

from __future__ import annotations

import logging
from typing import Any
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from ..scalar import working_dtype
from ..vector import Vec4
from ..vector import Vector
from .base import NumericMatrixNxN
from .mat2 import Mat2
from .mat3 import Mat3


_LOG: logging.Logger = logging.getLogger(__name__)


class Mat4(NumericMatrixNxN):
    """A 4x4 matrix with columns x, y, z and w."""

    SIZE: ClassVar[int] = 4
    VECTOR: ClassVar[type[Vector]] = Vec4

    @classmethod
    def from_mat2(cls, m: Mat2) -> Mat4:
        """Embed a 2x2 matrix in the top-left block of the identity."""
        if not isinstance(m, Mat2):
            raise TypeError(f"from_mat2 requires a Mat2, got {type(m).__name__}")
        return cls._widen(m)

    @classmethod
    def from_mat3(cls, m: Mat3) -> Mat4:
        """Embed a 3x3 matrix in the top-left block of the identity."""
        if not isinstance(m, Mat3):
            raise TypeError(f"from_mat3 requires a Mat3, got {type(m).__name__}")
        return cls._widen(m)

    def det(self) -> Any:
        """Return the determinant by cofactor expansion along the first row."""
        m: NDArray[Any] = self.columns
        d: Any = 0
        for c in range(4):
            # Minor without column c and row 0
            minor: Mat3 = Mat3(np.delete(m, c, axis=0)[:, 1:])
            term: Any = m[c][0] * minor.det()
            d = d + term if c % 2 == 0 else d - term
        return d

    def _invert_nonsingular(self, d: Any) -> Mat4:
        """Invert by Gauss-Jordan elimination with partial pivoting.

        ``a`` starts as this matrix and ``inv`` as the identity, both
        row-major. Every row operation is applied to both, so ``inv`` ends as
        the inverse once ``a`` has been reduced to the identity.
        """
        dtype: np.dtype = working_dtype(self.dtype)
        a: NDArray[Any] = np.array(self.columns.T, dtype=dtype)
        inv: NDArray[Any] = np.array(Mat4.identity(dtype).columns, dtype=dtype)

        for j in range(4):
            # Largest magnitude in column j among rows j..3, first one on ties
            pivot: int = j
            for i in range(j + 1, 4):
                if abs(a[i][j]) > abs(a[pivot][j]):
                    pivot = i
            _LOG.debug("Gauss-Jordan column %d: pivot row %d", j, pivot)

            if pivot != j:
                a[[j, pivot]] = a[[pivot, j]]
                inv[[j, pivot]] = inv[[pivot, j]]

            scale: Any = a[j][j]
            a[j] = a[j] / scale
            inv[j] = inv[j] / scale

            for i in range(4):
                if i != j:
                    factor: Any = a[i][j]
                    a[i] = a[i] - a[j] * factor
                    inv[i] = inv[i] - inv[j] * factor

        return Mat4(inv.T)
