################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size column-major matrices."""

from __future__ import annotations

from oasis_math.matrix.base import Matrix
from oasis_math.matrix.base import Matrix2
from oasis_math.matrix.base import Matrix3
from oasis_math.matrix.base import NumericMatrix
from oasis_math.matrix.base import NumericMatrixNxN
from oasis_math.matrix.mat2 import Mat2
from oasis_math.matrix.mat3 import Mat3
from oasis_math.matrix.mat4 import Mat4


__all__ = [
    "Mat2",
    "Mat3",
    "Mat4",
    "Matrix",
    "Matrix2",
    "Matrix3",
    "NumericMatrix",
    "NumericMatrixNxN",
]
