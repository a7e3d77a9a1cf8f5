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
"""Apparent Gibbs energy of minerals from :cite:t:`BB83,BB84` and the TWQ volume model

The heat capacity follows :cite:t:`BB84`:

.. math::

    C_p = k_1 + k_4 T^{-1/2} + k_3 T^{-2} + k_8 T^{-3}

The volume follows the simple TWQ function described in the Theriak-Domino guide (p53). The
apparent Gibbs energy is benchmarked against theriak using the JUN92d database for kyanite.
"""

# Convenient to use symbols so pylint: disable=invalid-name

import logging
import sys
from typing import Callable

import equinox as eqx
import jax
import jax.numpy as jnp
from jaxtyping import Array, ArrayLike, Float
from molmass import Formula

from thermodiff import PRESSURE_REFERENCE, TEMPERATURE_REFERENCE
from thermodiff.utilities import as_j64, get_broadcast_shape, unit_conversion

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)

VOLUME_T_SCALING: float = 1.0e-5
"""Scaling of the raw v1 and v2 coefficients"""
VOLUME_P_SCALING: float = 1.0e-5
"""Scaling of the raw v3 coefficient"""
VOLUME_P2_SCALING: float = 1.0e-8
"""Scaling of the raw v4 coefficient"""


def heat_capacity(
    temperature: ArrayLike, k1: float, k4: float, k3: float, k8: float
) -> Float[Array, "..."]:
    r"""Heat capacity :cite:p:`BB84`

    Args:
        temperature: Temperature in K
        k1: Constant coefficient in :math:`\mathrm{J}\mathrm{mol}^{-1}\mathrm{K}^{-1}`
        k4: Coefficient of :math:`T^{-1/2}`
        k3: Coefficient of :math:`T^{-2}`
        k8: Coefficient of :math:`T^{-3}`

    Returns:
        Heat capacity in :math:`\mathrm{J}\mathrm{mol}^{-1}\mathrm{K}^{-1}`
    """
    temperature = as_j64(temperature)

    return k1 + k4 / jnp.sqrt(temperature) + k3 / temperature**2 + k8 / temperature**3


def integrate_Cp(
    temperature: ArrayLike, k1: float, k4: float, k3: float, k8: float
) -> Float[Array, "..."]:
    r"""Integral of the heat capacity from the reference temperature to temperature

    Temperature must be positive. Otherwise the result is not finite.

    Args:
        temperature: Temperature in K
        k1: Constant coefficient
        k4: Coefficient of :math:`T^{-1/2}`
        k3: Coefficient of :math:`T^{-2}`
        k8: Coefficient of :math:`T^{-3}`

    Returns:
        :math:`\int C_p dT` in :math:`\mathrm{J}\mathrm{mol}^{-1}`
    """
    temperature = as_j64(temperature)
    T0: Array = as_j64(TEMPERATURE_REFERENCE)

    return (
        k1 * (temperature - T0)
        - k3 * (1 / temperature - 1 / T0)
        + 2 * k4 * (jnp.sqrt(temperature) - jnp.sqrt(T0))
        - k8 / 2 * (1 / temperature**2 - 1 / T0**2)
    )


def integrate_CpT(
    temperature: ArrayLike, k1: float, k4: float, k3: float, k8: float
) -> Float[Array, "..."]:
    r"""Integral of the heat capacity over temperature from the reference temperature

    This is the entropy correction. Temperature must be positive. Otherwise the result is not
    finite.

    Args:
        temperature: Temperature in K
        k1: Constant coefficient
        k4: Coefficient of :math:`T^{-1/2}`
        k3: Coefficient of :math:`T^{-2}`
        k8: Coefficient of :math:`T^{-3}`

    Returns:
        :math:`\int C_p/T dT` in :math:`\mathrm{J}\mathrm{mol}^{-1}\mathrm{K}^{-1}`
    """
    temperature = as_j64(temperature)
    T0: Array = as_j64(TEMPERATURE_REFERENCE)

    return (
        k1 * jnp.log(temperature / T0)
        - k3 / 2 * (1 / temperature**2 - 1 / T0**2)
        - 2 * k4 * (1 / jnp.sqrt(temperature) - 1 / jnp.sqrt(T0))
        - k8 / 3 * (1 / temperature**3 - 1 / T0**3)
    )


def volume(
    temperature: ArrayLike,
    pressure: ArrayLike,
    volume0: float,
    v1: float,
    v2: float,
    v3: float,
    v4: float,
) -> Float[Array, "..."]:
    r"""Volume from the simple TWQ function

    Args:
        temperature: Temperature in K
        pressure: Pressure in bar
        volume0: Volume at the reference state in :math:`\mathrm{J}\mathrm{bar}^{-1}`
        v1: Raw coefficient of :math:`T-T_0`
        v2: Raw coefficient of :math:`(T-T_0)^2`
        v3: Raw coefficient of :math:`P-P_0`
        v4: Raw coefficient of :math:`(P-P_0)^2`

    Returns:
        Volume in :math:`\mathrm{J}\mathrm{bar}^{-1}`
    """
    Vta, Vtb, Vpa, Vpb = _get_volume_terms(volume0, v1, v2, v3, v4)
    delta_temperature: Array = as_j64(temperature) - TEMPERATURE_REFERENCE
    delta_pressure: Array = as_j64(pressure) - PRESSURE_REFERENCE

    return (
        volume0
        + Vta * delta_temperature
        + Vtb * delta_temperature**2
        + Vpa * delta_pressure
        + Vpb * delta_pressure**2
    )


def integrate_V(
    temperature: ArrayLike,
    pressure: ArrayLike,
    volume0: float,
    v1: float,
    v2: float,
    v3: float,
    v4: float,
) -> Float[Array, "..."]:
    r"""Integral of the TWQ volume from the reference state to temperature and pressure

    The pressure terms are written about the reference pressure so the integral vanishes at the
    reference state for all coefficients. The cubic term is the exact integral of the :math:`v_4`
    term so it differs from the form evaluated by theriak, :math:`P^3/3 - P^2 P_0 + P P_0^5/3`,
    when :math:`v_4 \neq 0`. The two agree for minerals without a :math:`v_4` term.

    Args:
        temperature: Temperature in K
        pressure: Pressure in bar
        volume0: Volume at the reference state in :math:`\mathrm{J}\mathrm{bar}^{-1}`
        v1: Raw coefficient of :math:`T-T_0`
        v2: Raw coefficient of :math:`(T-T_0)^2`
        v3: Raw coefficient of :math:`P-P_0`
        v4: Raw coefficient of :math:`(P-P_0)^2`

    Returns:
        :math:`\int V dP` in :math:`\mathrm{J}\mathrm{mol}^{-1}`
    """
    Vta, Vtb, Vpa, Vpb = _get_volume_terms(volume0, v1, v2, v3, v4)
    delta_temperature: Array = as_j64(temperature) - TEMPERATURE_REFERENCE
    delta_pressure: Array = as_j64(pressure) - PRESSURE_REFERENCE

    return (
        (volume0 + Vta * delta_temperature + Vtb * delta_temperature**2) * delta_pressure
        + Vpa * delta_pressure**2 / 2
        + Vpb * delta_pressure**3 / 3  # Not the theriak form, see docstring
    )


def _get_volume_terms(
    volume0: float, v1: float, v2: float, v3: float, v4: float
) -> tuple[float, float, float, float]:
    """Converts the raw TWQ coefficients (Theriak-Domino guide, p53)

    Args:
        volume0: Volume at the reference state
        v1: Raw coefficient of T-T0
        v2: Raw coefficient of (T-T0)^2
        v3: Raw coefficient of P-P0
        v4: Raw coefficient of (P-P0)^2

    Returns:
        Vta, Vtb, Vpa, Vpb
    """
    Vta: float = v1 * VOLUME_T_SCALING * volume0
    Vtb: float = v2 * VOLUME_T_SCALING * volume0
    Vpa: float = v3 * VOLUME_P_SCALING * volume0
    Vpb: float = v4 * VOLUME_P2_SCALING * volume0

    return Vta, Vtb, Vpa, Vpb


def apparent_gibbs_energy(
    pressure: ArrayLike,
    temperature: ArrayLike,
    enthalpy: float,
    entropy: float,
    volume0: float,
    k1: float,
    k4: float,
    k3: float,
    k8: float,
    v1: float,
    v2: float,
    v3: float,
    v4: float,
) -> Float[Array, "..."]:
    r"""Apparent Gibbs energy :cite:p:`BB83`

    .. math::

        \Delta_a G = \Delta_f H^\circ + \int C_p dT - T S^\circ - T \int C_p/T dT + \int V dP

    Pressure and temperature are broadcast together. Non-physical temperatures propagate as NaN
    or Inf.

    Args:
        pressure: Pressure in bar
        temperature: Temperature in K
        enthalpy: Standard enthalpy of formation in :math:`\mathrm{J}\mathrm{mol}^{-1}`
        entropy: Standard entropy in :math:`\mathrm{J}\mathrm{mol}^{-1}\mathrm{K}^{-1}`
        volume0: Volume at the reference state in :math:`\mathrm{J}\mathrm{bar}^{-1}`
        k1: Heat capacity coefficient :cite:p:`BB84`
        k4: Heat capacity coefficient :cite:p:`BB84`
        k3: Heat capacity coefficient :cite:p:`BB84`
        k8: Heat capacity coefficient :cite:p:`BB84`
        v1: TWQ volume coefficient
        v2: TWQ volume coefficient
        v3: TWQ volume coefficient
        v4: TWQ volume coefficient

    Returns:
        Apparent Gibbs energy in :math:`\mathrm{J}\mathrm{mol}^{-1}`

    Raises:
        IncompatibleShapesError: If pressure and temperature cannot be broadcast together
    """
    get_broadcast_shape(pressure, temperature)

    def gibbs(pressure_: Array, temperature_: Array) -> Array:
        cp_integral: Array = integrate_Cp(temperature_, k1, k4, k3, k8)
        cpt_integral: Array = integrate_CpT(temperature_, k1, k4, k3, k8)
        volume_integral: Array = integrate_V(temperature_, pressure_, volume0, v1, v2, v3, v4)

        return (
            enthalpy
            + cp_integral
            - temperature_ * entropy
            - temperature_ * cpt_integral
            + volume_integral
        )

    return jnp.vectorize(gibbs)(as_j64(pressure), as_j64(temperature))


class MineralData(eqx.Module):
    """Thermodynamic data for a mineral

    Derived properties are computed by automatic differentiation of the apparent Gibbs energy.

    Args:
        name: Name of the mineral
        formula: Chemical formula
        enthalpy: Standard enthalpy of formation in J/mol
        entropy: Standard entropy in J/mol/K
        volume: Volume at the reference state in J/bar
        cp_coefficients: Heat capacity coefficients (k1, k4, k3, k8)
        volume_coefficients: Raw TWQ volume coefficients (v1, v2, v3, v4)
    """

    name: str = eqx.field(static=True)
    """Name of the mineral"""
    formula: str = eqx.field(static=True)
    """Chemical formula"""
    enthalpy: float
    """Standard enthalpy of formation in J/mol"""
    entropy: float
    """Standard entropy in J/mol/K"""
    volume: float
    """Volume at the reference state in J/bar"""
    cp_coefficients: tuple[float, float, float, float]
    """Heat capacity coefficients (k1, k4, k3, k8)"""
    volume_coefficients: tuple[float, float, float, float]
    """Raw TWQ volume coefficients (v1, v2, v3, v4)"""

    @classmethod
    def create(
        cls,
        name: str,
        formula: str,
        *,
        enthalpy: float,
        entropy: float,
        volume: float,
        cp_coefficients: tuple[float, float, float, float],
        volume_coefficients: tuple[float, float, float, float] = (0, 0, 0, 0),
    ) -> Self:
        """Creates an instance

        Args:
            name: Name of the mineral
            formula: Chemical formula
            enthalpy: Standard enthalpy of formation in J/mol
            entropy: Standard entropy in J/mol/K
            volume: Volume at the reference state in J/bar
            cp_coefficients: Heat capacity coefficients (k1, k4, k3, k8)
            volume_coefficients: Raw TWQ volume coefficients (v1, v2, v3, v4). Defaults to zeros.

        Returns:
            An instance
        """
        return cls(
            name,
            formula,
            float(enthalpy),
            float(entropy),
            float(volume),
            tuple(float(coeff) for coeff in cp_coefficients),  # type: ignore
            tuple(float(coeff) for coeff in volume_coefficients),  # type: ignore
        )

    @property
    def molar_mass(self) -> float:
        """Molar mass in kg/mol"""
        return Formula(self.formula).mass * unit_conversion.g_to_kg

    def _gibbs(self, temperature: ArrayLike, pressure: ArrayLike) -> Array:
        return apparent_gibbs_energy(
            pressure,
            temperature,
            self.enthalpy,
            self.entropy,
            self.volume,
            *self.cp_coefficients,
            *self.volume_coefficients,
        )

    def _broadcast(
        self, func: Callable, temperature: ArrayLike, pressure: ArrayLike
    ) -> Float[Array, "..."]:
        """Evaluates a scalar function of temperature and pressure elementwise"""
        get_broadcast_shape(pressure, temperature)

        return jnp.vectorize(func)(as_j64(temperature), as_j64(pressure))

    def get_gibbs(self, temperature: ArrayLike, pressure: ArrayLike) -> Float[Array, "..."]:
        """Gets the apparent Gibbs energy

        Args:
            temperature: Temperature in K
            pressure: Pressure in bar

        Returns:
            Apparent Gibbs energy in J/mol
        """
        return self._gibbs(temperature, pressure)

    def get_entropy(self, temperature: ArrayLike, pressure: ArrayLike) -> Float[Array, "..."]:
        """Gets the entropy

        Args:
            temperature: Temperature in K
            pressure: Pressure in bar

        Returns:
            Entropy in J/mol/K
        """
        dgibbs_dT: Callable = jax.grad(self._gibbs, argnums=0)

        return -self._broadcast(dgibbs_dT, temperature, pressure)

    def get_volume(self, temperature: ArrayLike, pressure: ArrayLike) -> Float[Array, "..."]:
        """Gets the volume

        Args:
            temperature: Temperature in K
            pressure: Pressure in bar

        Returns:
            Volume in J/bar
        """
        dgibbs_dP: Callable = jax.grad(self._gibbs, argnums=1)

        return self._broadcast(dgibbs_dP, temperature, pressure)

    def get_enthalpy(self, temperature: ArrayLike, pressure: ArrayLike) -> Float[Array, "..."]:
        """Gets the apparent enthalpy

        Args:
            temperature: Temperature in K
            pressure: Pressure in bar

        Returns:
            Enthalpy in J/mol
        """
        gibbs: Array = self.get_gibbs(temperature, pressure)
        entropy: Array = self.get_entropy(temperature, pressure)

        return gibbs + as_j64(temperature) * entropy

    def get_heat_capacity(
        self, temperature: ArrayLike, pressure: ArrayLike
    ) -> Float[Array, "..."]:
        """Gets the heat capacity

        Args:
            temperature: Temperature in K
            pressure: Pressure in bar

        Returns:
            Heat capacity in J/mol/K
        """
        d2gibbs_dT2: Callable = jax.grad(jax.grad(self._gibbs, argnums=0), argnums=0)

        return -as_j64(temperature) * self._broadcast(d2gibbs_dT2, temperature, pressure)

    def get_density(self, temperature: ArrayLike, pressure: ArrayLike) -> Float[Array, "..."]:
        """Gets the density

        Args:
            temperature: Temperature in K
            pressure: Pressure in bar

        Returns:
            Density in kg/m^3
        """
        volume_m3: Array = self.get_volume(temperature, pressure) * unit_conversion.J_to_m3_bar

        return self.molar_mass / volume_m3
