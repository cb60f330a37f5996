################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-size column vectors used as matrix columns."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any
from typing import ClassVar
from typing import Iterator
from typing import Optional
from typing import TypeVar

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from .config.linalg_params import LinalgParams
from .scalar import cast
from .scalar import fuzzy_eq_array
from .scalar import resolve_dtype
from .validation import as_components
from .validation import check_index


_VectorT = TypeVar("_VectorT", bound="Vector")


@dataclass(frozen=True, eq=False, repr=False)
class Vector:
    """Immutable vector of SIZE scalars.

    Equality with ``==`` is fuzzy. Use exact_eq() for strict comparison of
    exactly representable scalars.
    """

    components: NDArray[Any]

    SIZE: ClassVar[int] = 0

    # Make numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        """Validate the component count and freeze storage."""
        object.__setattr__(
            self,
            "components",
            as_components(self.components, (self.SIZE,), "components"),
        )

    @classmethod
    def new(cls: type[_VectorT], *components: Any) -> _VectorT:
        """Create a vector from SIZE scalars."""
        if len(components) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} requires {cls.SIZE} components, got {len(components)}"
            )
        return cls(components)

    @classmethod
    def zero(
        cls: type[_VectorT],
        dtype: Optional[DTypeLike] = None,
        params: Optional[LinalgParams] = None,
    ) -> _VectorT:
        """Return the zero vector."""
        return cls(
            np.full(
                cls.SIZE, cast(0, dtype, params), dtype=resolve_dtype(dtype, params)
            ),
        )

    @property
    def dtype(self) -> np.dtype:
        """Return the scalar type of the components."""
        return self.components.dtype

    def __getitem__(self, index: int) -> Any:
        return self.components[check_index(index, self.SIZE, "component")]

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[Any]:
        return iter(self.components)

    def add_v(self: _VectorT, other: _VectorT) -> _VectorT:
        """Return the component-wise sum."""
        self._check_same_type(other, "add_v")
        return type(self)(self.components + other.components)

    def sub_v(self: _VectorT, other: _VectorT) -> _VectorT:
        """Return the component-wise difference."""
        self._check_same_type(other, "sub_v")
        return type(self)(self.components - other.components)

    def mul_t(self: _VectorT, value: Any) -> _VectorT:
        """Scale every component."""
        return type(self)(self.components * value)

    def div_t(self: _VectorT, value: Any) -> _VectorT:
        """Divide every component."""
        return type(self)(self.components / value)

    def neg(self: _VectorT) -> _VectorT:
        """Negate every component."""
        return type(self)(-self.components)

    def dot(self, other: Vector) -> Any:
        """Return the inner product."""
        self._check_same_type(other, "dot")
        return self.components.dot(other.components)

    def exact_eq(self, other: Vector) -> bool:
        """Compare components without tolerance."""
        self._check_same_type(other, "exact_eq")
        return bool(np.array_equal(self.components, other.components))

    def fuzzy_eq(
        self,
        other: Vector,
        epsilon: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> bool:
        """Compare components within the fuzzy tolerance."""
        self._check_same_type(other, "fuzzy_eq")
        return fuzzy_eq_array(self.components, other.components, epsilon, params)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.fuzzy_eq(other)

    def __neg__(self: _VectorT) -> _VectorT:
        return self.neg()

    def __add__(self: _VectorT, other: object) -> _VectorT:
        if type(other) is not type(self):
            return NotImplemented
        return self.add_v(other)  # type: ignore[arg-type]

    def __sub__(self: _VectorT, other: object) -> _VectorT:
        if type(other) is not type(self):
            return NotImplemented
        return self.sub_v(other)  # type: ignore[arg-type]

    def __mul__(self: _VectorT, value: object) -> _VectorT:
        if not isinstance(value, numbers.Number):
            return NotImplemented
        return self.mul_t(value)

    __rmul__ = __mul__

    def __truediv__(self: _VectorT, value: object) -> _VectorT:
        if not isinstance(value, numbers.Number):
            return NotImplemented
        return self.div_t(value)

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self.components.tolist())
        return f"{type(self).__name__}.new({values})"

    def _check_same_type(self, other: object, operation: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{operation} requires a {type(self).__name__}, "
                f"got {type(other).__name__}"
            )


class Vec2(Vector):
    """Two-component vector."""

    SIZE: ClassVar[int] = 2


class Vec3(Vector):
    """Three-component vector."""

    SIZE: ClassVar[int] = 3

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product."""
        self._check_same_type(other, "cross")
        a: NDArray[Any] = self.components
        b: NDArray[Any] = other.components
        return Vec3.new(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )


class Vec4(Vector):
    """Four-component vector."""

    SIZE: ClassVar[int] = 4
