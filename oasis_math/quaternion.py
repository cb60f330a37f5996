################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Quaternion type using the wxyz convention."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any
from typing import Optional

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from .config.linalg_params import LinalgParams
from .scalar import cast
from .scalar import fuzzy_eq_array
from .scalar import resolve_dtype
from .scalar import resolve_params
from .validation import as_components
from .vector import Vec3


if TYPE_CHECKING:
    from .matrix.mat3 import Mat3


@dataclass(frozen=True, eq=False, repr=False)
class Quat:
    """Quaternion stored in wxyz order."""

    wxyz: NDArray[Any]

    # Make numpy scalars defer to Quat instead of broadcasting over it
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        """Validate quaternion components and freeze storage."""
        object.__setattr__(self, "wxyz", as_components(self.wxyz, (4,), "wxyz"))

    @staticmethod
    def new(w: Any, x: Any, y: Any, z: Any) -> Quat:
        """Create a quaternion from its scalar part and vector part."""
        return Quat((w, x, y, z))

    @staticmethod
    def identity(
        dtype: Optional[DTypeLike] = None, params: Optional[LinalgParams] = None
    ) -> Quat:
        """Return the identity quaternion."""
        _0: Any = cast(0, dtype, params)
        _1: Any = cast(1, dtype, params)
        return Quat(np.array([_1, _0, _0, _0], dtype=resolve_dtype(dtype, params)))

    @staticmethod
    def from_axis_angle(
        axis: Vec3, angle: float, params: Optional[LinalgParams] = None
    ) -> Quat:
        """Create a rotation of angle radians about an axis."""
        vec: NDArray[np.float64] = np.asarray(axis.components, dtype=float)
        norm: float = float(np.linalg.norm(vec))
        if norm < resolve_params(params).quat.norm_eps:
            raise ValueError("axis has near-zero norm")
        half: float = 0.5 * angle
        xyz: NDArray[np.float64] = vec * (np.sin(half) / norm)
        return Quat.new(np.cos(half), xyz[0], xyz[1], xyz[2])

    @property
    def w(self) -> Any:
        return self.wxyz[0]

    @property
    def x(self) -> Any:
        return self.wxyz[1]

    @property
    def y(self) -> Any:
        return self.wxyz[2]

    @property
    def z(self) -> Any:
        return self.wxyz[3]

    def to_wxyz(self) -> NDArray[Any]:
        """Return a writable copy of the quaternion components."""
        return np.array(self.wxyz)

    def normalized(self, params: Optional[LinalgParams] = None) -> Quat:
        """Return a normalized quaternion."""
        q: NDArray[np.float64] = np.asarray(self.wxyz, dtype=float)
        norm: float = float(np.linalg.norm(q))
        if norm < resolve_params(params).quat.norm_eps:
            raise ValueError("Quaternion norm is too small")
        return Quat(q / norm)

    def conjugate(self) -> Quat:
        """Return the conjugate quaternion."""
        return Quat.new(self.w, -self.x, -self.y, -self.z)

    def __mul__(self, other: object) -> Quat:
        """Multiply two quaternions using the Hamilton product."""
        if not isinstance(other, Quat):
            return NotImplemented
        w1, x1, y1, z1 = self.wxyz
        w2, x2, y2, z2 = other.wxyz
        return Quat.new(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def to_mat3(self, params: Optional[LinalgParams] = None) -> Mat3:
        """Return the rotation matrix of the normalized quaternion."""
        from .matrix.mat3 import Mat3

        w, x, y, z = (float(value) for value in self.normalized(params).wxyz)

        # Columns of the rotation matrix
        return Mat3.new(
            1.0 - 2.0 * (y * y + z * z),
            2.0 * (x * y + z * w),
            2.0 * (x * z - y * w),
            2.0 * (x * y - z * w),
            1.0 - 2.0 * (x * x + z * z),
            2.0 * (y * z + x * w),
            2.0 * (x * z + y * w),
            2.0 * (y * z - x * w),
            1.0 - 2.0 * (x * x + y * y),
        )

    def exact_eq(self, other: Quat) -> bool:
        """Compare components without tolerance."""
        return bool(np.array_equal(self.wxyz, other.wxyz))

    def fuzzy_eq(
        self,
        other: Quat,
        epsilon: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> bool:
        """Compare components within the fuzzy tolerance."""
        return fuzzy_eq_array(self.wxyz, other.wxyz, epsilon, params)

    def almost_equal(
        self,
        other: Quat,
        epsilon: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> bool:
        """Check approximate equality, accounting for sign ambiguity."""
        if self.fuzzy_eq(other, epsilon, params):
            return True
        return fuzzy_eq_array(self.wxyz, -other.wxyz, epsilon, params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return self.fuzzy_eq(other)

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self.wxyz.tolist())
        return f"Quat.new({values})"
