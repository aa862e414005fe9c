"""Shared fixtures: a deterministic steam property provider.

    Tsat(P)        = 100 + 30 · ln(P)
    h_super(P, T)  = 2500 + Tsat(P) + 2 · (T - Tsat(P))
    h_vapour(T)    = 2500 + T
    h_liquid(T)    = 4.18 · T
"""

import math

import pytest

from vapour_thermal.core.steam import SteamPropertyProvider


class AnalyticSaturation(SteamPropertyProvider):
    """Fake provider that only knows Tsat(P); Psat(T) comes from inversion."""

    def saturation_temperature(self, pressure_bar: float) -> float:
        return 100.0 + 30.0 * math.log(pressure_bar)

    def enthalpy_superheated(self, pressure_bar: float, temperature_c: float) -> float:
        t_sat = self.saturation_temperature(pressure_bar)
        return 2500.0 + t_sat + 2.0 * (temperature_c - t_sat)

    def enthalpy_vapour(self, temperature_c: float) -> float:
        return 2500.0 + temperature_c

    def enthalpy_liquid(self, temperature_c: float) -> float:
        return 4.18 * temperature_c


class FakeSteamProvider(AnalyticSaturation):
    """Fake provider with the closed-form inverse Psat(T) = exp((T - 100) / 30)."""

    def saturation_pressure(self, temperature_c: float) -> float:
        return math.exp((temperature_c - 100.0) / 30.0)


@pytest.fixture
def fake_steam() -> FakeSteamProvider:
    return FakeSteamProvider()


@pytest.fixture
def fake_steam_inverting() -> AnalyticSaturation:
    return AnalyticSaturation()
