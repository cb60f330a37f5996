################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""3x3 column-major matrix and its conversion to a quaternion."""

from __future__ import annotations

import logging
from typing import Any
from typing import ClassVar
from typing import Optional

import numpy as np

from ..config.linalg_params import LinalgParams
from ..quaternion import Quat
from ..scalar import extended
from ..scalar import narrow
from ..vector import Vec3
from ..vector import Vector
from .base import Matrix3
from .base import NumericMatrixNxN
from .mat2 import Mat2


_LOG: logging.Logger = logging.getLogger(__name__)


class Mat3(Matrix3, NumericMatrixNxN):
    """A 3x3 matrix with columns x, y and z."""

    SIZE: ClassVar[int] = 3
    VECTOR: ClassVar[type[Vector]] = Vec3

    @classmethod
    def from_mat2(cls, m: Mat2) -> Mat3:
        """Embed a 2x2 matrix in the top-left block of the identity."""
        if not isinstance(m, Mat2):
            raise TypeError(f"from_mat2 requires a Mat2, got {type(m).__name__}")
        return cls._widen(m)

    def col(self, i: int) -> Vec3:
        return super().col(i)  # type: ignore[return-value]

    def det(self) -> Any:
        """Return the scalar triple product of the columns."""
        return self.col(0).dot(self.col(1).cross(self.col(2)))

    def _invert_nonsingular(self, d: Any) -> Mat3:
        # Rows of the inverse are pairwise cross products of the columns
        c0: Vec3 = self.col(0)
        c1: Vec3 = self.col(1)
        c2: Vec3 = self.col(2)
        return Mat3.from_cols(
            c1.cross(c2).div_t(d),
            c2.cross(c0).div_t(d),
            c0.cross(c1).div_t(d),
        ).transpose()

    def to_quat(self, params: Optional[LinalgParams] = None) -> Quat:
        """Convert a rotation matrix to a quaternion.

        Uses Shoemake's method: the square root is always taken of the largest
        of the trace and the diagonal-dominant terms, so its argument is never
        negative. The input is not checked for orthonormality; the result is
        only a unit quaternion for proper rotations.

        Arithmetic is done in extended precision, unless
        ``params.quat.extended_precision`` is disabled, and cast back to the
        matrix scalar type (see narrow()). Complex matrices raise TypeError.
        """
        if self.dtype.kind == "c":
            raise TypeError(f"to_quat requires real scalars, got dtype {self.dtype}")

        m: list[list[Any]] = [
            [extended(value, params) for value in col] for col in self.columns
        ]

        trace: Any = m[0][0] + m[1][1] + m[2][2]

        # The square root sets w in the trace branch, and otherwise the x, y or
        # z component of the dominant diagonal entry. In those three branches w
        # comes from an antisymmetric difference and the other two from sums.
        if trace >= 0.0:
            branch: str = "trace"
            s: Any = np.sqrt(trace + 1.0)
            w: Any = 0.5 * s
            s = 0.5 / s
            x: Any = (m[1][2] - m[2][1]) * s
            y: Any = (m[2][0] - m[0][2]) * s
            z: Any = (m[0][1] - m[1][0]) * s
        elif m[0][0] > m[1][1] and m[0][0] > m[2][2]:
            branch = "x"
            s = np.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2])
            x = 0.5 * s
            s = 0.5 / s
            w = (m[1][2] - m[2][1]) * s
            y = (m[0][1] + m[1][0]) * s
            z = (m[2][0] + m[0][2]) * s
        elif m[1][1] > m[2][2]:
            branch = "y"
            s = np.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2])
            y = 0.5 * s
            s = 0.5 / s
            w = (m[2][0] - m[0][2]) * s
            x = (m[0][1] + m[1][0]) * s
            z = (m[1][2] + m[2][1]) * s
        else:
            branch = "z"
            s = np.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1])
            z = 0.5 * s
            s = 0.5 / s
            w = (m[0][1] - m[1][0]) * s
            x = (m[2][0] + m[0][2]) * s
            y = (m[1][2] + m[2][1]) * s

        _LOG.debug("Quaternion extraction using the %s branch", branch)

        dtype: np.dtype = self.dtype
        return Quat.new(
            narrow(w, dtype),
            narrow(x, dtype),
            narrow(y, dtype),
            narrow(z, dtype),
        )
