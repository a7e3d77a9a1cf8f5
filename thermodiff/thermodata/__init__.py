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
"""Thermodata package level variables"""

# Expose public API
from thermodiff.thermodata.core import (
    MineralData,  # noqa: F401
    apparent_gibbs_energy,  # noqa: F401
    heat_capacity,  # noqa: F401
    integrate_Cp,  # noqa: F401
    integrate_CpT,  # noqa: F401
    integrate_V,  # noqa: F401
    volume,  # noqa: F401
)
from thermodiff.thermodata.library import (
    get_thermodata,  # noqa: F401
    select_thermodata,  # noqa: F401
)
