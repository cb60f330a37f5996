################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size vector, matrix and quaternion math."""

from __future__ import annotations

from oasis_math.matrix.base import Matrix
from oasis_math.matrix.base import NumericMatrix
from oasis_math.matrix.base import NumericMatrixNxN
from oasis_math.matrix.mat2 import Mat2
from oasis_math.matrix.mat3 import Mat3
from oasis_math.matrix.mat4 import Mat4
from oasis_math.quaternion import Quat
from oasis_math.vector import Vec2
from oasis_math.vector import Vec3
from oasis_math.vector import Vec4
from oasis_math.vector import Vector


__all__ = [
    "Mat2",
    "Mat3",
    "Mat4",
    "Matrix",
    "NumericMatrix",
    "NumericMatrixNxN",
    "Quat",
    "Vec2",
    "Vec3",
    "Vec4",
    "Vector",
]
