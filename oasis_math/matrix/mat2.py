################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""2x2 column-major matrix."""

from __future__ import annotations

from typing import Any
from typing import ClassVar

from numpy.typing import NDArray

from ..vector import Vec2
from ..vector import Vector
from .base import Matrix2
from .base import NumericMatrixNxN


class Mat2(Matrix2, NumericMatrixNxN):
    """A 2x2 matrix with columns x and y."""

    SIZE: ClassVar[int] = 2
    VECTOR: ClassVar[type[Vector]] = Vec2

    def det(self) -> Any:
        m: NDArray[Any] = self.columns
        return m[0][0] * m[1][1] - m[1][0] * m[0][1]

    def _invert_nonsingular(self, d: Any) -> Mat2:
        # Adjugate over determinant
        m: NDArray[Any] = self.columns
        return Mat2.new(
            m[1][1] / d,
            -m[0][1] / d,
            -m[1][0] / d,
            m[0][0] / d,
        )
