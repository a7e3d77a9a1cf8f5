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
"""Utilities"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, ArrayLike, Float
from scipy.constants import kilo

logger: logging.Logger = logging.getLogger(__name__)


class IncompatibleShapesError(ValueError):
    """Pressure and temperature arrays cannot be broadcast together"""


def as_j64(x: ArrayLike) -> Float[Array, "..."]:
    """Converts input to a JAX array of dtype float64

    Args:
        x: Input to convert

    Returns:
        JAX array of dtype float64
    """
    return jnp.asarray(x, dtype=jnp.float64)


def get_broadcast_shape(pressure: ArrayLike, temperature: ArrayLike) -> tuple[int, ...]:
    """Gets the broadcast shape of pressure and temperature

    Shapes are static under :func:`jax.jit` so this check happens before any evaluation.

    Args:
        pressure: Pressure in bar
        temperature: Temperature in K

    Returns:
        The broadcast shape

    Raises:
        IncompatibleShapesError: If the shapes cannot be broadcast together
    """
    pressure_shape: tuple[int, ...] = np.shape(pressure)
    temperature_shape: tuple[int, ...] = np.shape(temperature)

    try:
        shape: tuple[int, ...] = np.broadcast_shapes(pressure_shape, temperature_shape)
    except ValueError as exc:
        msg: str = (
            f"Incompatible shapes for pressure {pressure_shape} and temperature "
            f"{temperature_shape}"
        )
        raise IncompatibleShapesError(msg) from exc

    return shape


# Convenient to use symbol names so pylint: disable=invalid-name
@dataclass(frozen=True)
class UnitConversion:
    """Unit conversions"""

    g_to_kg: float = 1 / kilo
    cm3_to_m3: float = 1.0e-6
    J_to_m3_bar: float = 1.0e-5


unit_conversion = UnitConversion()
