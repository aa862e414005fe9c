"""Steam/water property provider contract and its CoolProp implementation.

The calculators never talk to a steam-table library directly. They take a
:class:`SteamPropertyProvider`, which production code satisfies with
:class:`IF97SteamProvider` (CoolProp's IAPWS-IF97 backend) and tests satisfy
with a deterministic analytical fake.

Units at this boundary: pressure in bar (absolute), temperature in °C,
specific enthalpy in kJ/kg.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from functools import lru_cache

from CoolProp.CoolProp import PropsSI
from scipy.optimize import brentq

from vapour_thermal.utils.constants import BAR_TO_PA, PA_TO_BAR, T_CELSIUS_OFFSET

logger = logging.getLogger(__name__)

# Bracket for inverting Tsat(P) when a provider has no direct Psat(T)
_P_MIN_BAR = 1.0e-6
_P_MAX_BAR = 1.0e5


class SteamPropertyError(Exception):
    """Raised when a steam/water property lookup fails."""


class SteamPropertyProvider(ABC):
    """Saturation and enthalpy data for water and steam.

    Implementations must be side-effect free: the calculators call them
    freely and from several threads at once.
    """

    @abstractmethod
    def saturation_temperature(self, pressure_bar: float) -> float:
        """Saturation temperature [°C] at pressure [bar]."""
        ...

    def saturation_pressure(self, temperature_c: float) -> float:
        """Saturation pressure [bar] at temperature [°C].

        The default inverts :meth:`saturation_temperature` on log-pressure,
        so a provider only has to supply one direction.
        """

        def residual(ln_p: float) -> float:
            return self.saturation_temperature(math.exp(ln_p)) - temperature_c

        try:
            ln_p = brentq(residual, math.log(_P_MIN_BAR), math.log(_P_MAX_BAR), xtol=1e-12)
        except ValueError as exc:
            raise SteamPropertyError(
                f"Cannot invert saturation temperature at {temperature_c} °C: {exc}"
            ) from exc
        return math.exp(ln_p)

    def is_superheated(self, pressure_bar: float, temperature_c: float) -> bool:
        """True when steam at (P, T) lies above the saturation line."""
        return temperature_c > self.saturation_temperature(pressure_bar)

    @abstractmethod
    def enthalpy_superheated(self, pressure_bar: float, temperature_c: float) -> float:
        """Specific enthalpy [kJ/kg] of superheated steam at (P, T)."""
        ...

    @abstractmethod
    def enthalpy_vapour(self, temperature_c: float) -> float:
        """Specific enthalpy [kJ/kg] of saturated vapour at T."""
        ...

    @abstractmethod
    def enthalpy_liquid(self, temperature_c: float) -> float:
        """Specific enthalpy [kJ/kg] of saturated liquid at T."""
        ...


class IF97SteamProvider(SteamPropertyProvider):
    """Steam/water properties from CoolProp.

    Args:
        backend: CoolProp backend. ``"IF97"`` (default) uses the IAPWS
                 industrial formulation; ``"HEOS"`` uses IAPWS-95.
    """

    def __init__(self, backend: str = "IF97"):
        self.backend = backend
        self.fluid = f"{backend}::Water"

    def _props(self, output: str, name1: str, value1: float, name2: str, value2: float) -> float:
        try:
            return PropsSI(output, name1, value1, name2, value2, self.fluid)
        except Exception as exc:
            raise SteamPropertyError(
                f"{self.fluid}: lookup of {output} at {name1}={value1}, {name2}={value2} "
                f"failed: {exc}"
            ) from exc

    def saturation_temperature(self, pressure_bar: float) -> float:
        T = self._props("T", "P", pressure_bar * BAR_TO_PA, "Q", 1.0)
        return T - T_CELSIUS_OFFSET

    def saturation_pressure(self, temperature_c: float) -> float:
        P = self._props("P", "T", temperature_c + T_CELSIUS_OFFSET, "Q", 1.0)
        return P * PA_TO_BAR

    def enthalpy_superheated(self, pressure_bar: float, temperature_c: float) -> float:
        h = self._props(
            "H", "P", pressure_bar * BAR_TO_PA, "T", temperature_c + T_CELSIUS_OFFSET
        )
        return h / 1000.0

    def enthalpy_vapour(self, temperature_c: float) -> float:
        return self._props("H", "T", temperature_c + T_CELSIUS_OFFSET, "Q", 1.0) / 1000.0

    def enthalpy_liquid(self, temperature_c: float) -> float:
        return self._props("H", "T", temperature_c + T_CELSIUS_OFFSET, "Q", 0.0) / 1000.0

    def __repr__(self) -> str:
        return f"IF97SteamProvider(backend='{self.backend}')"


@lru_cache(maxsize=4)
def get_default_provider(backend: str = "IF97") -> IF97SteamProvider:
    """Return a shared CoolProp-backed provider for *backend*."""
    logger.debug("Creating steam property provider with backend %s", backend)
    return IF97SteamProvider(backend)
