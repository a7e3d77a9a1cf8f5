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
"""Thermodynamic data for minerals"""

import logging

from thermodiff.thermodata._minerals import kyanite
from thermodiff.thermodata.core import MineralData

logger: logging.Logger = logging.getLogger(__name__)


def get_thermodata() -> dict[str, MineralData]:
    """Gets a dictionary of thermodynamic data for minerals

    Returns:
        Dictionary of thermodynamic data for minerals
    """
    mineral_data: dict[str, MineralData] = {
        "kyanite": kyanite,
    }

    return mineral_data


def select_thermodata(mineral_name: str) -> MineralData:
    """Selects thermodynamic data for a mineral

    Args:
        mineral_name: Name of the mineral

    Returns:
        Thermodynamic data for the mineral
    """
    mineral_data: dict[str, MineralData] = get_thermodata()

    try:
        data: MineralData = mineral_data[mineral_name.lower()]
    except KeyError as exc:
        msg: str = f"Thermodynamic data for '{mineral_name}' is not available"
        logger.warning(msg)
        logger.warning("Available options are: %s", list(mineral_data.keys()))
        raise ValueError(msg) from exc

    logger.debug("Selected thermodynamic data for %s", data.name)

    return data
