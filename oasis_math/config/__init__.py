################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the linear algebra core."""

from __future__ import annotations

from oasis_math.config.linalg_params import DEFAULT_PARAMS
from oasis_math.config.linalg_params import LinalgParams
from oasis_math.config.linalg_params import LinalgParamsError
from oasis_math.config.linalg_params import QuatParams
from oasis_math.config.linalg_params import ScalarParams
from oasis_math.config.linalg_params import ToleranceParams


__all__ = [
    "DEFAULT_PARAMS",
    "LinalgParams",
    "LinalgParamsError",
    "QuatParams",
    "ScalarParams",
    "ToleranceParams",
]
