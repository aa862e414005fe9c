"""Unit conversion utilities for Vapour Thermal.

Plant-unit conversions used by every calculator (t/h, bar, metres of
liquid head) are plain arithmetic so they round-trip exactly. Arbitrary
conversions go through a shared pint registry.
"""

from __future__ import annotations

from functools import lru_cache

import pint

from vapour_thermal.utils.constants import (
    BAR_TO_PA,
    GRAVITY,
    KG_PER_TONNE,
    SECONDS_PER_HOUR,
)

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


# --- Plant-unit conversions ---


def ton_hr_to_kg_s(value: float) -> float:
    """Convert a mass flow from tonne/h to kg/s."""
    return value * KG_PER_TONNE / SECONDS_PER_HOUR


def kg_s_to_ton_hr(value: float) -> float:
    """Convert a mass flow from kg/s to tonne/h."""
    return value * SECONDS_PER_HOUR / KG_PER_TONNE


def bar_to_head(pressure_bar: float, density: float) -> float:
    """Convert a pressure to the equivalent liquid column.

    h = P / (ρ · g)

    Args:
        pressure_bar: Pressure (or pressure difference) [bar].
        density: Liquid density [kg/m³].

    Returns:
        Head [m].
    """
    return pressure_bar * BAR_TO_PA / (density * GRAVITY)


def head_to_bar(head_m: float, density: float) -> float:
    """Convert a liquid column [m] of density [kg/m³] to pressure [bar]."""
    return head_m * density * GRAVITY / BAR_TO_PA


def ton_hr_to_m3_s(value: float, density: float) -> float:
    """Convert a mass flow in tonne/h to a volumetric flow in m³/s."""
    return ton_hr_to_kg_s(value) / density


# --- General conversions ---


def pressure_to_bar(value: float, unit: str) -> float:
    """Convert an absolute pressure to bar.

    Args:
        value: Numeric pressure value.
        unit: Source unit string (e.g. "Pa", "kPa", "psi", "atm", "mbar").

    Returns:
        Pressure in bar.
    """
    return Q_(value, unit).to("bar").magnitude


def temperature_to_celsius(value: float, unit: str) -> float:
    """Convert a temperature to °C.

    Args:
        value: Numeric temperature value.
        unit: Source unit string (e.g. "K", "degF", "degR").

    Returns:
        Temperature in °C.
    """
    return Q_(value, unit).to("degC").magnitude


def mass_flow_to_ton_hr(value: float, unit: str) -> float:
    """Convert a mass flow rate to tonne/h."""
    return Q_(value, unit).to("t/h").magnitude


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
