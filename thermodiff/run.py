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
"""Command line driver to evaluate the thermodynamic properties of a mineral"""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Sequence

from thermodiff import PRESSURE_REFERENCE, TEMPERATURE_REFERENCE, logger
from thermodiff.thermodata import MineralData, select_thermodata


def main(argv: Sequence[str] | None = None) -> None:
    """Main driver.

    Args:
        argv: Command line arguments. Defaults to None, meaning use sys.argv.
    """
    logger.setLevel(logging.INFO)
    if not logger.handlers or all(
        isinstance(handler, logging.NullHandler) for handler in logger.handlers
    ):
        logger.addHandler(logging.StreamHandler())

    logger.info("Started")
    start: float = time.time()

    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Apparent Gibbs energy of a mineral"
    )
    parser.add_argument(
        "-m",
        "--mineral",
        help="Name of the mineral",
        action="store",
        type=str,
        default="kyanite",
    )
    parser.add_argument(
        "-p",
        "--pressure",
        help="Pressure in bar",
        action="store",
        type=float,
        default=PRESSURE_REFERENCE,
    )
    parser.add_argument(
        "-t",
        "--temperature",
        help="Temperature in K",
        action="store",
        type=float,
        default=TEMPERATURE_REFERENCE,
    )

    args = parser.parse_args(argv)

    mineral: MineralData = select_thermodata(args.mineral)
    temperature: float = args.temperature
    pressure: float = args.pressure

    logger.info("Mineral = %s (%s)", mineral.name, mineral.formula)
    logger.info("Temperature (K) = %f, pressure (bar) = %f", temperature, pressure)
    logger.info("Apparent Gibbs energy (J/mol) = %f", mineral.get_gibbs(temperature, pressure))
    logger.info("Entropy (J/mol/K) = %f", mineral.get_entropy(temperature, pressure))
    logger.info("Volume (J/bar) = %f", mineral.get_volume(temperature, pressure))
    logger.info("Density (kg/m^3) = %f", mineral.get_density(temperature, pressure))

    end: float = time.time()
    runtime: float = round(end - start, 1)
    logger.info("Execution time (seconds) = %0.1f", runtime)
    logger.info("Finished")


if __name__ == "__main__":
    main()
