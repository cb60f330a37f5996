################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Capabilities shared by the fixed-size square matrices.

Responsibility:
    Implement each matrix algorithm once over the fixed dimension SIZE, so
    that Mat2, Mat3 and Mat4 only supply what is genuinely
    dimension-specific (the determinant and the inverse of a non-singular
    matrix).

Capabilities:
    - Matrix: shape queries, column and row access, exact and fuzzy equality.
    - NumericMatrix: negation, scaling and matrix-vector products.
    - NumericMatrixNxN: square-matrix algebra. Addition, subtraction,
      products, transposition and the structural predicates need only ring
      arithmetic and are usable with integer scalars. det(), invert() and
      is_invertible() are only meaningful for field-like scalars.
    - Matrix2, Matrix3: widening into higher dimensions.

Data contract:
    - Storage is column-major: ``columns[c][r]`` is row r of column c, and
      ``m[c]`` returns column c as a vector.
    - Matrices are immutable. Operations return new values.
    - ``==`` is fuzzy equality. Matrices are therefore unhashable.

Determinism and edge cases:
    - Column and row indices outside [0, SIZE) raise IndexError. Negative
      indices are never wrapped.
    - invert() returns None when the determinant is fuzzy-equal to zero, and
      is_invertible() uses the same test, so the two always agree.

Configuration:
    Constructors, fuzzy comparisons and inversion accept an optional
    ``params`` tree. When it is None ``DEFAULT_PARAMS`` are used. An explicit
    ``epsilon`` argument takes precedence over ``params.tolerance``.
"""

from __future__ import annotations

import abc
import logging
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Iterator
from typing import Optional
from typing import TypeVar

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from ..config.linalg_params import LinalgParams
from ..scalar import cast
from ..scalar import fuzzy_eq
from ..scalar import fuzzy_zero
from ..scalar import resolve_dtype
from ..validation import as_components
from ..validation import check_index
from ..vector import Vector


if TYPE_CHECKING:
    from .mat3 import Mat3
    from .mat4 import Mat4


_LOG: logging.Logger = logging.getLogger(__name__)

_MatrixT = TypeVar("_MatrixT", bound="Matrix")


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """Fixed-size square matrix stored as SIZE column vectors."""

    columns: NDArray[Any]

    SIZE: ClassVar[int] = 0
    VECTOR: ClassVar[type[Vector]] = Vector

    # Make numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        """Validate the shape and freeze storage."""
        object.__setattr__(
            self,
            "columns",
            as_components(self.columns, (self.SIZE, self.SIZE), "columns"),
        )

    @classmethod
    def new(cls: type[_MatrixT], *components: Any) -> _MatrixT:
        """Create a matrix from SIZE * SIZE scalars, column by column."""
        size: int = cls.SIZE
        if len(components) != size * size:
            raise ValueError(
                f"{cls.__name__} requires {size * size} components, "
                f"got {len(components)}"
            )
        return cls([components[c * size : (c + 1) * size] for c in range(size)])

    @classmethod
    def from_cols(cls: type[_MatrixT], *cols: Vector) -> _MatrixT:
        """Create a matrix from SIZE column vectors."""
        if len(cols) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} requires {cls.SIZE} columns, got {len(cols)}"
            )
        for col in cols:
            if type(col) is not cls.VECTOR:
                raise TypeError(
                    f"{cls.__name__} columns must be {cls.VECTOR.__name__}, "
                    f"got {type(col).__name__}"
                )
        return cls([col.components for col in cols])

    @classmethod
    def from_value(cls: type[_MatrixT], value: Any) -> _MatrixT:
        """Create a matrix with value on the diagonal and zero elsewhere."""
        _0: Any = cast(0, np.asarray(value).dtype)
        return cls(
            [
                [value if r == c else _0 for r in range(cls.SIZE)]
                for c in range(cls.SIZE)
            ]
        )

    @classmethod
    def zero(
        cls: type[_MatrixT],
        dtype: Optional[DTypeLike] = None,
        params: Optional[LinalgParams] = None,
    ) -> _MatrixT:
        """Return the zero matrix."""
        size: int = cls.SIZE
        return cls(
            np.full(
                (size, size),
                cast(0, dtype, params),
                dtype=resolve_dtype(dtype, params),
            )
        )

    @classmethod
    def identity(
        cls: type[_MatrixT],
        dtype: Optional[DTypeLike] = None,
        params: Optional[LinalgParams] = None,
    ) -> _MatrixT:
        """Return the identity matrix."""
        _0: Any = cast(0, dtype, params)
        _1: Any = cast(1, dtype, params)
        return cls(
            np.array(
                [
                    [_1 if r == c else _0 for r in range(cls.SIZE)]
                    for c in range(cls.SIZE)
                ],
                dtype=resolve_dtype(dtype, params),
            )
        )

    @classmethod
    def _widen(cls: type[_MatrixT], source: Matrix) -> _MatrixT:
        """Embed a smaller matrix in the top-left block of the identity."""
        size: int = source.SIZE
        if size >= cls.SIZE:
            raise TypeError(f"cannot widen {type(source).__name__} to {cls.__name__}")
        block: NDArray[Any] = np.array(cls.identity(source.dtype).columns)
        block[:size, :size] = source.columns
        return cls(block)

    @property
    def dtype(self) -> np.dtype:
        """Return the scalar type of the elements."""
        return self.columns.dtype

    def rows(self) -> int:
        return self.SIZE

    def cols(self) -> int:
        return self.SIZE

    def is_col_major(self) -> bool:
        return True

    def is_square(self) -> bool:
        return True

    def col(self, i: int) -> Vector:
        """Return column i."""
        return self.VECTOR(self.columns[check_index(i, self.SIZE, "column")])

    def row(self, i: int) -> Vector:
        """Return row i, built from component i of every column."""
        return self.VECTOR(self.columns[:, check_index(i, self.SIZE, "row")])

    def __getitem__(self, i: int) -> Vector:
        return self.col(i)

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[Vector]:
        for i in range(self.SIZE):
            yield self.col(i)

    def exact_eq(self, other: Matrix) -> bool:
        """Compare every column without tolerance."""
        self._check_same_type(other, "exact_eq")
        return all(a.exact_eq(b) for a, b in zip(self, other))

    def fuzzy_eq(
        self,
        other: Matrix,
        epsilon: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> bool:
        """Compare every column within the fuzzy tolerance."""
        self._check_same_type(other, "fuzzy_eq")
        return all(a.fuzzy_eq(b, epsilon, params) for a, b in zip(self, other))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.fuzzy_eq(other)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.columns.tolist()!r})"

    def _check_same_type(self, other: object, operation: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{operation} requires a {type(self).__name__}, "
                f"got {type(other).__name__}"
            )


class NumericMatrix(Matrix):
    """Linear-map operations requiring only ring arithmetic."""

    def neg(self: _MatrixT) -> _MatrixT:
        """Negate every column."""
        return type(self).from_cols(*(col.neg() for col in self))

    def mul_t(self: _MatrixT, value: Any) -> _MatrixT:
        """Scale every column by a scalar."""
        return type(self).from_cols(*(col.mul_t(value) for col in self))

    def mul_v(self, vector: Vector) -> Vector:
        """Return the matrix-vector product."""
        if type(vector) is not self.VECTOR:
            raise TypeError(
                f"mul_v requires a {self.VECTOR.__name__}, "
                f"got {type(vector).__name__}"
            )
        return self.VECTOR.new(*(self.row(i).dot(vector) for i in range(self.SIZE)))

    def __neg__(self: _MatrixT) -> _MatrixT:
        return self.neg()  # type: ignore[attr-defined,no-any-return]

    def __mul__(self: _MatrixT, value: object) -> _MatrixT:
        if not isinstance(value, numbers.Number):
            return NotImplemented
        return self.mul_t(value)  # type: ignore[attr-defined,no-any-return]

    __rmul__ = __mul__


class NumericMatrixNxN(NumericMatrix, metaclass=abc.ABCMeta):
    """Square-matrix algebra.

    Concrete dimensions must override det() and _invert_nonsingular().
    """

    # Division-free operations

    def add_m(self: _MatrixT, other: _MatrixT) -> _MatrixT:
        """Return the column-wise sum."""
        self._check_same_type(other, "add_m")
        return type(self).from_cols(*(a.add_v(b) for a, b in zip(self, other)))

    def sub_m(self: _MatrixT, other: _MatrixT) -> _MatrixT:
        """Return the column-wise difference."""
        self._check_same_type(other, "sub_m")
        return type(self).from_cols(*(a.sub_v(b) for a, b in zip(self, other)))

    def mul_m(self: _MatrixT, other: _MatrixT) -> _MatrixT:
        """Return the matrix product, element (r, c) = row(r) . other.col(c)."""
        self._check_same_type(other, "mul_m")
        rows: list[Vector] = [self.row(r) for r in range(self.SIZE)]
        return type(self)(
            [[row.dot(col) for row in rows] for col in other]
        )

    def transpose(self: _MatrixT) -> _MatrixT:
        """Swap the roles of rows and columns."""
        return type(self)(self.columns.T)

    def is_identity(
        self, epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
    ) -> bool:
        """Return True when fuzzy-equal to the identity."""
        return self.fuzzy_eq(type(self).identity(self.dtype), epsilon, params)

    def is_symmetric(
        self, epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
    ) -> bool:
        """Return True when every off-diagonal pair is fuzzy-equal."""
        m: NDArray[Any] = self.columns
        return all(
            fuzzy_eq(m[c][r], m[r][c], epsilon, params)
            for c in range(self.SIZE)
            for r in range(c + 1, self.SIZE)
        )

    def is_diagonal(
        self, epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
    ) -> bool:
        """Return True when every off-diagonal element is fuzzy-zero."""
        m: NDArray[Any] = self.columns
        return all(
            fuzzy_zero(m[c][r], epsilon, params)
            for c in range(self.SIZE)
            for r in range(self.SIZE)
            if r != c
        )

    def is_rotated(
        self, epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
    ) -> bool:
        """Return True when the matrix is not fuzzy-equal to the identity.

        Any non-identity matrix qualifies, including pure scales and shears.
        No orthonormality check is made.
        """
        return not self.is_identity(epsilon, params)

    # Operations requiring a field

    @abc.abstractmethod
    def det(self) -> Any:
        """Return the determinant."""

    def invert(
        self: _MatrixT,
        epsilon: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> Optional[_MatrixT]:
        """Return the inverse, or None when the matrix is singular."""
        d: Any = self.det()  # type: ignore[attr-defined]
        if fuzzy_zero(d, epsilon, params):
            _LOG.debug("%s is singular (det=%s), no inverse", type(self).__name__, d)
            return None
        return self._invert_nonsingular(d)  # type: ignore[attr-defined,no-any-return]

    def is_invertible(
        self, epsilon: Optional[float] = None, params: Optional[LinalgParams] = None
    ) -> bool:
        """Return True when the determinant is not fuzzy-zero."""
        return not fuzzy_zero(self.det(), epsilon, params)

    @abc.abstractmethod
    def _invert_nonsingular(self: _MatrixT, d: Any) -> _MatrixT:
        """Return the inverse given its non-zero determinant d."""

    def __add__(self: _MatrixT, other: object) -> _MatrixT:
        if type(other) is not type(self):
            return NotImplemented
        return self.add_m(other)  # type: ignore[attr-defined,no-any-return]

    def __sub__(self: _MatrixT, other: object) -> _MatrixT:
        if type(other) is not type(self):
            return NotImplemented
        return self.sub_m(other)  # type: ignore[attr-defined,no-any-return]

    def __matmul__(self, other: object) -> Any:
        if type(other) is type(self):
            return self.mul_m(other)  # type: ignore[arg-type]
        if type(other) is self.VECTOR:
            return self.mul_v(other)  # type: ignore[arg-type]
        return NotImplemented


class Matrix2:
    """Widening of a 2x2 matrix into homogeneous 3x3 and 4x4 forms."""

    def to_mat3(self) -> Mat3:
        from .mat3 import Mat3

        return Mat3.from_mat2(self)  # type: ignore[arg-type]

    def to_mat4(self) -> Mat4:
        from .mat4 import Mat4

        return Mat4.from_mat2(self)  # type: ignore[arg-type]


class Matrix3:
    """Widening of a 3x3 matrix into the homogeneous 4x4 form."""

    def to_mat4(self) -> Mat4:
        from .mat4 import Mat4

        return Mat4.from_mat3(self)  # type: ignore[arg-type]
