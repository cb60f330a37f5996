################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for scalar capabilities and storage validation."""

from __future__ import annotations

from fractions import Fraction

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams
from oasis_math.config.linalg_params import QuatParams
from oasis_math.config.linalg_params import ScalarParams
from oasis_math.config.linalg_params import ToleranceParams
from oasis_math.scalar import cast
from oasis_math.scalar import extended
from oasis_math.scalar import fuzzy_eq
from oasis_math.scalar import fuzzy_eq_array
from oasis_math.scalar import fuzzy_zero
from oasis_math.scalar import narrow
from oasis_math.scalar import resolve_dtype
from oasis_math.scalar import resolve_epsilon
from oasis_math.scalar import resolve_params
from oasis_math.scalar import working_dtype
from oasis_math.validation import as_components
from oasis_math.validation import check_index


def test_cast_literals() -> None:
    """Integer literals should take on the requested scalar type."""
    assert isinstance(cast(1, np.float32), np.float32)
    assert isinstance(cast(0, np.int64), np.int64)
    assert isinstance(cast(1), np.float64)
    assert cast(1, object) == 1
    assert type(cast(1, object)) is int


def test_resolve_dtype_default() -> None:
    """The configured default dtype should apply when none is given."""
    assert resolve_dtype() == np.dtype(np.float64)
    assert resolve_dtype(np.int32) == np.dtype(np.int32)


def test_fuzzy_equality() -> None:
    """Values closer than the tolerance should compare equal."""
    assert fuzzy_eq(1.0, 1.0 + 1e-9)
    assert not fuzzy_eq(1.0, 1.001)
    assert fuzzy_eq(1.0, 1.001, epsilon=1e-2)
    assert fuzzy_zero(-1e-9)
    assert not fuzzy_zero(1e-3)
    assert fuzzy_eq(Fraction(1, 3), Fraction(1, 3))
    assert fuzzy_eq(3, 3)
    assert not fuzzy_eq(3, 4)


def test_fuzzy_eq_array() -> None:
    """All components must be within the tolerance."""
    a: NDArray[np.float64] = np.array([1.0, 2.0, 3.0])
    assert fuzzy_eq_array(a, a + 1e-9)
    assert not fuzzy_eq_array(a, np.array([1.0, 2.0, 3.1]))
    b: NDArray[np.object_] = np.array([Fraction(1, 2), Fraction(1, 3)], dtype=object)
    assert fuzzy_eq_array(b, b)


def test_working_dtype() -> None:
    """Integers should promote to float, other types are kept."""
    assert working_dtype(np.dtype(np.int64)) == np.dtype(np.float64)
    assert working_dtype(np.dtype(np.float32)) == np.dtype(np.float32)
    assert working_dtype(np.dtype(object)) == np.dtype(object)


def test_extended_and_narrow() -> None:
    """Extended values should narrow back to the matrix scalar type."""
    value: np.floating = extended(Fraction(1, 4))
    assert value == 0.25
    assert isinstance(narrow(value, np.dtype(np.float32)), np.float32)
    assert isinstance(narrow(value, np.dtype(np.int64)), np.float64)
    assert isinstance(narrow(value, np.dtype(object)), np.float64)


def test_params_override_defaults() -> None:
    """A custom parameter tree should replace every default it carries."""
    params: LinalgParams = DEFAULT_PARAMS.replace(
        tolerance=ToleranceParams(fuzzy_epsilon=1e-2),
        scalar=ScalarParams(default_dtype="float32"),
        quat=QuatParams(extended_precision=False),
    )
    params.validate()

    assert resolve_params() is DEFAULT_PARAMS
    assert resolve_params(params) is params

    assert resolve_dtype(params=params) == np.dtype(np.float32)
    assert isinstance(cast(1, params=params), np.float32)
    assert resolve_dtype(np.int32, params) == np.dtype(np.int32)

    assert resolve_epsilon(params=params) == 1e-2
    assert resolve_epsilon(1e-3, params) == 1e-3
    assert fuzzy_eq(1.0, 1.001, params=params)
    assert not fuzzy_eq(1.0, 1.001)
    assert fuzzy_zero(1e-3, params=params)
    assert fuzzy_eq_array(np.zeros(2), np.full(2, 1e-3), params=params)

    assert type(extended(0.25)) is np.longdouble
    assert type(extended(0.25, params)) is np.float64
    assert type(extended(Fraction(1, 4), params)) is np.float64


def test_as_components_shape_and_dtype() -> None:
    """Storage should be read-only and keep the inferred scalar type."""
    array: NDArray[np.int64] = as_components([1, 2, 3], (3,), "v")
    assert array.dtype.kind == "i"
    assert not array.flags.writeable

    with pytest.raises(ValueError, match="shape"):
        as_components([1, 2], (3,), "v")
    with pytest.raises(ValueError, match="numeric"):
        as_components(["a", "b"], (2,), "v")
    with pytest.raises(ValueError, match="numeric"):
        as_components([True, False], (2,), "v")


def test_check_index() -> None:
    """Indices outside the range should fail loudly, never wrap."""
    assert check_index(0, 3, "column") == 0
    assert check_index(np.int64(2), 3, "column") == 2
    with pytest.raises(IndexError):
        check_index(3, 3, "column")
    with pytest.raises(IndexError):
        check_index(-1, 3, "column")
    with pytest.raises(TypeError):
        check_index(1.0, 3, "column")
    with pytest.raises(TypeError):
        check_index(True, 3, "column")
