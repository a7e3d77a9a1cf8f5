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
"""Thermodynamic data for minerals from the JUN92d database distributed with theriak

Heat capacity coefficients follow :cite:t:`BB84` and volume coefficients follow the simple TWQ
function.
"""

from thermodiff.thermodata.core import MineralData

kyanite: MineralData = MineralData.create(
    "kyanite",
    "Al2SiO5",
    enthalpy=-2594220.46,
    entropy=82.4300,
    volume=4.412,
    cp_coefficients=(262.68478, -2001.407, -1999740.0, -63181880.0),
    volume_coefficients=(2.39725295, 0.0, -0.06459655, 0.0),
)
"Mineral data for kyanite"
