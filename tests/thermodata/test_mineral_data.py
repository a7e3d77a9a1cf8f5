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
"""Tests for properties derived from the apparent Gibbs energy by automatic differentiation"""

# Convenient to use symbol names so pylint: disable=invalid-name

import logging
from typing import Callable

import jax
import numpy as np
import numpy.testing as nptest
import pytest
from jax.typing import ArrayLike
from pytest import approx

from thermodiff import PRESSURE_REFERENCE, TEMPERATURE_REFERENCE, debug_logger
from thermodiff.thermodata import (
    MineralData,
    get_thermodata,
    heat_capacity,
    integrate_CpT,
    select_thermodata,
    volume,
)
from thermodiff.utilities import IncompatibleShapesError, unit_conversion

logger: logging.Logger = debug_logger()

RTOL: float = 1.0e-8
"""Relative tolerance"""
ATOL: float = 1.0e-8
"""Absolute tolerance"""

kyanite: MineralData = select_thermodata("kyanite")
"""Kyanite from the JUN92d database"""

synthetic: MineralData = MineralData.create(
    "synthetic",
    "MgSiO3",
    enthalpy=-1500000.0,
    entropy=60.0,
    volume=3.1,
    cp_coefficients=(150.0, -800.0, -1.5e6, 1.0e7),
    volume_coefficients=(2.0, 0.5, -0.1, 0.3),
)
"""Mineral with all volume terms active"""


def test_library() -> None:
    thermodata: dict[str, MineralData] = get_thermodata()

    assert "kyanite" in thermodata
    assert select_thermodata("Kyanite") is thermodata["kyanite"]


def test_library_unknown_mineral() -> None:
    with pytest.raises(ValueError, match="not available"):
        select_thermodata("unobtainium")


def test_gibbs_benchmark() -> None:
    gibbs: ArrayLike = kyanite.get_gibbs(573.15, 12000.0)

    assert float(gibbs) == approx(-2602600.11, abs=1.0e-2)


def test_entropy_at_reference() -> None:
    entropy: ArrayLike = kyanite.get_entropy(TEMPERATURE_REFERENCE, PRESSURE_REFERENCE)
    logger.info("entropy = %s", entropy)

    assert float(entropy) == approx(kyanite.entropy, RTOL, ATOL)


def test_entropy_at_reference_pressure() -> None:
    """At the reference pressure the entropy is the standard entropy plus the Cp/T integral"""
    temperature: np.ndarray = np.array([400.0, 800.0, 1200.0])

    entropy: ArrayLike = kyanite.get_entropy(temperature, PRESSURE_REFERENCE)
    expected: ArrayLike = kyanite.entropy + integrate_CpT(temperature, *kyanite.cp_coefficients)

    nptest.assert_allclose(entropy, expected, RTOL, ATOL)


def test_volume_at_reference() -> None:
    volume0: ArrayLike = kyanite.get_volume(TEMPERATURE_REFERENCE, PRESSURE_REFERENCE)

    assert float(volume0) == approx(kyanite.volume, RTOL, ATOL)


def test_volume_matches_model() -> None:
    """The pressure derivative of the Gibbs energy recovers the volume model"""
    temperature: np.ndarray = np.array([[500.0], [1000.0]])
    pressure: np.ndarray = np.array([1.0, 10000.0, 40000.0])

    volume_autodiff: ArrayLike = synthetic.get_volume(temperature, pressure)
    expected: ArrayLike = volume(
        temperature, pressure, synthetic.volume, *synthetic.volume_coefficients
    )

    assert np.shape(volume_autodiff) == (2, 3)
    nptest.assert_allclose(volume_autodiff, expected, RTOL, ATOL)


def test_heat_capacity_matches_model() -> None:
    temperature: np.ndarray = np.array([400.0, 573.15, 873.15, 1500.0])

    cp: ArrayLike = kyanite.get_heat_capacity(temperature, PRESSURE_REFERENCE)
    expected: ArrayLike = heat_capacity(temperature, *kyanite.cp_coefficients)
    logger.info("cp = %s", cp)

    nptest.assert_allclose(cp, expected, RTOL, ATOL)


def test_enthalpy_at_reference() -> None:
    enthalpy: ArrayLike = kyanite.get_enthalpy(TEMPERATURE_REFERENCE, PRESSURE_REFERENCE)

    assert float(enthalpy) == approx(kyanite.enthalpy, rel=1.0e-12)


def test_density_at_reference() -> None:
    """Kyanite density is about 3.67 g/cm^3"""
    density: ArrayLike = kyanite.get_density(TEMPERATURE_REFERENCE, PRESSURE_REFERENCE)
    logger.info("density = %s", density)

    assert kyanite.molar_mass == approx(0.16204, rel=1.0e-3)
    expected: float = 3.6728 * unit_conversion.g_to_kg / unit_conversion.cm3_to_m3
    assert float(density) == approx(expected, rel=1.0e-3)


def test_derived_properties_incompatible_shapes() -> None:
    with pytest.raises(IncompatibleShapesError):
        kyanite.get_entropy(np.ones(3), np.ones(2))


def test_mineral_data_through_jit() -> None:
    """MineralData is a pytree so it can be an argument of a jitted function"""
    gibbs_jit: Callable = jax.jit(lambda mineral, t, p: mineral.get_gibbs(t, p))

    gibbs: ArrayLike = gibbs_jit(kyanite, 573.15, 12000.0)

    assert float(gibbs) == approx(-2602600.11, abs=1.0e-2)
