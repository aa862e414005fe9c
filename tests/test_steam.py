"""Tests for the steam/water property provider contract."""

import math

import pytest

from vapour_thermal.core.steam import (
    IF97SteamProvider,
    SteamPropertyError,
    SteamPropertyProvider,
    get_default_provider,
)


class TestContractDefaults:
    """Behaviour the base class supplies to every provider."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            SteamPropertyProvider()

    @pytest.mark.parametrize("temperature_c", [20.0, 40.0, 100.0, 148.0, 250.0])
    def test_saturation_pressure_inverts_temperature(self, fake_steam_inverting, temperature_c):
        expected = math.exp((temperature_c - 100.0) / 30.0)
        assert fake_steam_inverting.saturation_pressure(temperature_c) == pytest.approx(
            expected, rel=1e-9
        )

    def test_inversion_outside_bracket_raises(self, fake_steam_inverting):
        # Psat would be exp(-50) bar, far below the search bracket
        with pytest.raises(SteamPropertyError):
            fake_steam_inverting.saturation_pressure(-1400.0)

    def test_is_superheated(self, fake_steam):
        t_sat = fake_steam.saturation_temperature(5.0)
        assert fake_steam.is_superheated(5.0, t_sat + 1.0)
        assert not fake_steam.is_superheated(5.0, t_sat)
        assert not fake_steam.is_superheated(5.0, 100.0)


class TestIF97Provider:
    """Reference points from the IAPWS-IF97 steam tables."""

    @pytest.fixture(scope="class")
    def steam(self):
        return IF97SteamProvider()

    def test_saturation_temperature_at_one_atm(self, steam):
        assert steam.saturation_temperature(1.01325) == pytest.approx(99.97, abs=0.05)

    def test_saturation_pressure_at_100c(self, steam):
        assert steam.saturation_pressure(100.0) == pytest.approx(1.01418, rel=1e-3)

    def test_saturation_round_trip(self, steam):
        p = steam.saturation_pressure(60.0)
        assert steam.saturation_temperature(p) == pytest.approx(60.0, abs=1e-6)

    def test_enthalpy_vapour(self, steam):
        assert steam.enthalpy_vapour(100.0) == pytest.approx(2675.6, abs=1.0)

    def test_enthalpy_liquid(self, steam):
        assert steam.enthalpy_liquid(100.0) == pytest.approx(419.1, abs=1.0)

    def test_enthalpy_superheated(self, steam):
        # 10 bar, 300 °C
        assert steam.enthalpy_superheated(10.0, 300.0) == pytest.approx(3051.7, abs=2.0)

    def test_is_superheated(self, steam):
        assert steam.is_superheated(10.0, 250.0)
        assert not steam.is_superheated(10.0, 150.0)

    def test_invalid_state_raises(self, steam):
        with pytest.raises(SteamPropertyError):
            steam.saturation_temperature(-1.0)

    def test_default_provider_is_cached(self):
        assert get_default_provider() is get_default_provider()
        assert get_default_provider().backend == "IF97"
