################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for vector, matrix and quaternion storage."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.linalg_params import SCALAR_KINDS


def as_components(values: Any, shape: tuple[int, ...], name: str) -> NDArray[Any]:
    """Return a read-only copy of the values with the target shape.

    The scalar type is inferred from the values, so integer, floating and
    object scalars such as ``fractions.Fraction`` are preserved.
    """
    array: NDArray[Any] = np.array(values)
    if array.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {array.shape}")
    if array.dtype.kind not in SCALAR_KINDS:
        raise ValueError(
            f"{name} must hold signed numeric scalars, got dtype {array.dtype}"
        )

    array.setflags(write=False)

    return array


def check_index(index: Any, size: int, name: str) -> int:
    """Return the index if it addresses one of ``size`` slots.

    Negative indices are rejected rather than wrapped.
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(
        index, (int, np.integer)
    ):
        raise TypeError(f"{name} index must be an int, got {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError(f"{name} index {index} out of range [0, {size})")

    return int(index)
