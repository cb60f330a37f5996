################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Scalar capabilities assumed by the matrix core.

Scalars are any values supporting ring arithmetic: Python and numpy integers
and floats, or objects such as ``fractions.Fraction`` stored with the numpy
``object`` dtype. Division is only exercised by inversion and the quaternion
bridge.

Every helper takes an optional ``params`` tree. When it is None the
validated ``DEFAULT_PARAMS`` are used.
"""

from __future__ import annotations

from typing import Any
from typing import Optional

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams


def resolve_params(params: Optional[LinalgParams] = None) -> LinalgParams:
    """Return the given parameter tree, or the defaults."""
    if params is None:
        return DEFAULT_PARAMS
    return params


def resolve_dtype(
    dtype: Optional[DTypeLike] = None, params: Optional[LinalgParams] = None
) -> np.dtype:
    """Return the numpy dtype for a scalar type, applying the default."""
    if dtype is None:
        return np.dtype(resolve_params(params).scalar.default_dtype)
    return np.dtype(dtype)


def resolve_epsilon(
    epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
) -> float:
    """Return the fuzzy tolerance, applying the default."""
    if epsilon is None:
        return resolve_params(params).tolerance.fuzzy_epsilon
    return epsilon


def cast(
    value: int, dtype: Optional[DTypeLike] = None, params: Optional[LinalgParams] = None
) -> Any:
    """Cast an integer literal to the scalar type of a dtype."""
    resolved: np.dtype = resolve_dtype(dtype, params)

    # Plain ints compose with Fraction, Decimal and other object scalars
    if resolved.kind == "O":
        return value

    return resolved.type(value)


def fuzzy_eq(
    a: Any,
    b: Any,
    epsilon: Optional[float] = None,
    params: Optional[LinalgParams] = None,
) -> bool:
    """Return True when two scalars differ by less than the tolerance."""
    return bool(abs(a - b) < resolve_epsilon(epsilon, params))


def fuzzy_zero(
    a: Any, epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
) -> bool:
    """Return True when a scalar is within the tolerance of zero."""
    return bool(abs(a) < resolve_epsilon(epsilon, params))


def fuzzy_eq_array(
    a: NDArray[Any],
    b: NDArray[Any],
    epsilon: Optional[float] = None,
    params: Optional[LinalgParams] = None,
) -> bool:
    """Return True when every pair of components is fuzzy-equal."""
    return bool(np.all(np.abs(a - b) < resolve_epsilon(epsilon, params)))


def working_dtype(dtype: np.dtype) -> np.dtype:
    """Return a dtype able to hold quotients of the given scalar type."""
    if dtype.kind == "i":
        return np.dtype(np.float64)
    return dtype


def extended(value: Any, params: Optional[LinalgParams] = None) -> np.floating:
    """Lift a real scalar into the precision used by the quaternion bridge.

    This is numpy longdouble, or float64 when
    ``quat.extended_precision`` is disabled.
    """
    if not isinstance(value, (np.generic, int, float)):
        value = float(value)
    if resolve_params(params).quat.extended_precision:
        return np.longdouble(value)
    return np.float64(value)


def narrow(value: np.floating, dtype: np.dtype) -> np.floating:
    """Cast an extended-precision result back to a matrix scalar type.

    Floating dtypes keep their own precision. Integer and object dtypes
    produce float64, since truncating a unit quaternion loses all of it.
    """
    if dtype.kind == "f":
        return dtype.type(value)
    return np.float64(value)
