################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the quaternion type."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams
from oasis_math.config.linalg_params import QuatParams
from oasis_math.matrix.mat3 import Mat3
from oasis_math.quaternion import Quat
from oasis_math.vector import Vec3


def test_identity() -> None:
    """The identity quaternion should have a unit scalar part."""
    q: Quat = Quat.identity()
    assert q.exact_eq(Quat.new(1.0, 0.0, 0.0, 0.0))
    assert (q.w, q.x, q.y, q.z) == (1.0, 0.0, 0.0, 0.0)
    assert q.to_mat3().is_identity()


def test_component_order() -> None:
    """Components should be stored as w, x, y, z."""
    q: Quat = Quat.new(1.0, 2.0, 3.0, 4.0)
    assert np.array_equal(q.to_wxyz(), [1.0, 2.0, 3.0, 4.0])
    with pytest.raises(ValueError):
        Quat(np.zeros(3))


def test_axis_angle_to_mat3() -> None:
    """A rotation about z should map to the column-major rotation matrix."""
    angle: float = 0.3
    q: Quat = Quat.from_axis_angle(Vec3.new(0.0, 0.0, 2.0), angle)
    c: float = math.cos(angle)
    s: float = math.sin(angle)
    expected: Mat3 = Mat3.new(c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)
    assert q.to_mat3() == expected


def test_zero_axis_rejected() -> None:
    """A zero rotation axis is undefined."""
    with pytest.raises(ValueError):
        Quat.from_axis_angle(Vec3.zero(), 1.0)


def test_multiplication_inverse() -> None:
    """A unit quaternion times its conjugate is the identity."""
    q: Quat = Quat.from_axis_angle(Vec3.new(0.2, 0.0, -0.1), 0.7)
    assert (q * q.conjugate()) == Quat.identity()


def test_product_matches_matrix_product() -> None:
    """Composition should match multiplying rotation matrices."""
    a: Quat = Quat.from_axis_angle(Vec3.new(1.0, 0.0, 0.0), 0.4)
    b: Quat = Quat.from_axis_angle(Vec3.new(0.0, 1.0, 0.0), -0.9)
    assert (a * b).to_mat3() == a.to_mat3().mul_m(b.to_mat3())


def test_normalized() -> None:
    """Normalization should produce unit length and reject zero."""
    q: Quat = Quat.new(2.0, 0.0, 0.0, 0.0).normalized()
    assert q == Quat.identity()
    with pytest.raises(ValueError):
        Quat.new(0.0, 0.0, 0.0, 0.0).normalized()


def test_almost_equal_sign_flip() -> None:
    """almost_equal should treat q and -q as the same rotation."""
    q: Quat = Quat.from_axis_angle(Vec3.new(0.1, -0.2, 0.1), 1.2)
    q_neg: Quat = Quat(-q.wxyz)
    assert q.almost_equal(q_neg)
    assert q != q_neg


def test_numpy_scalar_does_not_broadcast() -> None:
    """Quaternions have no scalar product, so numpy scalars are refused."""
    with pytest.raises(TypeError):
        np.float64(2.0) * Quat.identity()


def test_norm_eps_from_params() -> None:
    """The normalization threshold is read from the parameter tree."""
    params: LinalgParams = DEFAULT_PARAMS.replace(quat=QuatParams(norm_eps=1e-3))
    tiny: Quat = Quat.new(1e-4, 0.0, 0.0, 0.0)
    assert tiny.normalized() == Quat.new(1.0, 0.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        tiny.normalized(params)
    with pytest.raises(ValueError):
        Quat.from_axis_angle(Vec3.new(1e-4, 0.0, 0.0), 1.0, params)
