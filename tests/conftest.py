#
# Copyright 2024 The ThermoDiff developers
#
# This file is part of ThermoDiff.
#
# ThermoDiff is free software: you can redistribute it and/or modify it under the terms of the GNU
# General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# ThermoDiff is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with ThermoDiff. If not,
# see <https://www.gnu.org/licenses/>.
#
"""Utilities for tests"""

import pytest

KYANITE_PARAMETERS: tuple[float, ...] = (
    -2594220.46,  # Standard enthalpy of formation in J/mol
    82.4300,  # Standard entropy in J/mol/K
    4.412,  # Volume in J/bar
    262.68478,  # k1
    -2001.407,  # k4
    -1999740.0,  # k3
    -63181880.0,  # k8
    2.39725295,  # v1
    0.0,  # v2
    -0.06459655,  # v3
    0.0,  # v4
)
"""Kyanite from the JUN92d database"""


@pytest.fixture(scope="module")
def kyanite_parameters() -> tuple[float, ...]:
    return KYANITE_PARAMETERS
