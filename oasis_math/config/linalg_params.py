################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the fixed-size linear algebra core."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any

import numpy as np


# Absolute tolerance for fuzzy scalar equality
FUZZY_EPSILON: float = 1e-6

# Scalar dtype used by zero() and identity() when no dtype is given
DEFAULT_DTYPE: str = "float64"

# Evaluate the matrix to quaternion conversion in numpy longdouble
QUAT_EXTENDED_PRECISION: bool = True
# Quaternion norm below which normalization is rejected
QUAT_NORM_EPS: float = 1e-12

# numpy dtype kinds accepted as matrix scalars (signed int, float, complex, object)
SCALAR_KINDS: frozenset[str] = frozenset({"i", "f", "c", "O"})


class LinalgParamsError(Exception):
    """Raised when linear algebra parameter validation fails."""


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if value <= 0.0:
        raise LinalgParamsError(f"{name} must be positive")


@dataclass(frozen=True)
class ToleranceParams:
    """Tolerances used by fuzzy equality and the structural predicates."""

    # Absolute tolerance for fuzzy scalar equality
    fuzzy_epsilon: float = FUZZY_EPSILON


@dataclass(frozen=True)
class ScalarParams:
    """Scalar type defaults."""

    # Scalar dtype used when a constructor is not given one
    default_dtype: str = DEFAULT_DTYPE


@dataclass(frozen=True)
class QuatParams:
    """Quaternion conversion parameters."""

    # Evaluate the matrix to quaternion conversion in numpy longdouble
    extended_precision: bool = QUAT_EXTENDED_PRECISION
    # Quaternion norm below which normalization is rejected
    norm_eps: float = QUAT_NORM_EPS


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for the linear algebra core."""

    tolerance: ToleranceParams
    scalar: ScalarParams
    quat: QuatParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            scalar=ScalarParams(),
            quat=QuatParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive(self.tolerance.fuzzy_epsilon, "tolerance.fuzzy_epsilon")
        _require_positive(self.quat.norm_eps, "quat.norm_eps")

        try:
            dtype: np.dtype = np.dtype(self.scalar.default_dtype)
        except TypeError as exc:
            raise LinalgParamsError(
                f"scalar.default_dtype is not a numpy dtype: {self.scalar.default_dtype!r}"
            ) from exc
        if dtype.kind not in SCALAR_KINDS:
            raise LinalgParamsError(
                "scalar.default_dtype must be a signed integer, floating, "
                "complex or object dtype"
            )

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value


def _validated_defaults() -> LinalgParams:
    params: LinalgParams = LinalgParams.defaults()
    params.validate()
    return params


# Validated defaults consulted whenever a caller does not pass an override
DEFAULT_PARAMS: LinalgParams = _validated_defaults()
