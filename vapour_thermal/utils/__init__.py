"""Utility modules for Vapour Thermal."""

from vapour_thermal.utils.constants import GRAVITY, R_UNIVERSAL, T_CELSIUS_OFFSET
from vapour_thermal.utils.units import convert, get_unit_registry

__all__ = ["GRAVITY", "R_UNIVERSAL", "T_CELSIUS_OFFSET", "convert", "get_unit_registry"]
