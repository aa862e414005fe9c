"""Tests for constants, unit conversions and validation helpers."""

import pytest

from vapour_thermal.utils.constants import GRAVITY, M_AIR, M_H2O, R_UNIVERSAL
from vapour_thermal.utils.units import (
    bar_to_head,
    convert,
    head_to_bar,
    kg_s_to_ton_hr,
    mass_flow_to_ton_hr,
    pressure_to_bar,
    temperature_to_celsius,
    ton_hr_to_kg_s,
    ton_hr_to_m3_s,
)
from vapour_thermal.utils.validation import (
    CalculationWarning,
    ValidationError,
    ValidationResult,
    WarningCategory,
    validate_non_negative,
    validate_positive,
    validate_range,
)


class TestConstants:
    def test_gravity(self):
        assert GRAVITY == 9.81

    def test_r_universal(self):
        assert R_UNIVERSAL == pytest.approx(8.314, rel=1e-3)

    def test_molar_masses(self):
        assert M_H2O == pytest.approx(18.015)
        assert M_AIR == pytest.approx(28.97)


class TestFlowConversions:
    def test_ton_hr_to_kg_s(self):
        # 36 t/h = 36 000 kg / 3600 s
        assert ton_hr_to_kg_s(36.0) == pytest.approx(10.0)

    def test_kg_s_to_ton_hr(self):
        assert kg_s_to_ton_hr(10.0) == pytest.approx(36.0)

    @pytest.mark.parametrize("value", [1e-6, 0.707, 10.0, 1234.5, 9.9e7])
    def test_round_trip(self, value):
        assert kg_s_to_ton_hr(ton_hr_to_kg_s(value)) == pytest.approx(value, rel=1e-15)

    def test_ton_hr_to_m3_s(self):
        # 3.6 t/h of water at 1000 kg/m³ = 1 L/s
        assert ton_hr_to_m3_s(3.6, 1000.0) == pytest.approx(1e-3)


class TestHeadConversions:
    def test_one_bar_of_water(self):
        # h = 1e5 / (1000 · 9.81) ≈ 10.19 m
        assert bar_to_head(1.0, 1000.0) == pytest.approx(10.194, rel=1e-4)

    def test_scales_with_pressure(self):
        assert bar_to_head(2.0, 1000.0) == pytest.approx(2.0 * bar_to_head(1.0, 1000.0))

    def test_scales_inversely_with_density(self):
        assert bar_to_head(1.0, 1025.0) < bar_to_head(1.0, 1000.0)

    @pytest.mark.parametrize("pressure,density", [(0.05, 998.0), (1.0, 1000.0), (12.5, 1025.0)])
    def test_inverse(self, pressure, density):
        assert head_to_bar(bar_to_head(pressure, density), density) == pytest.approx(
            pressure, rel=1e-14
        )


class TestPintConversions:
    def test_pressure_kpa_to_bar(self):
        assert pressure_to_bar(101.325, "kPa") == pytest.approx(1.01325)

    def test_pressure_psi_to_bar(self):
        assert pressure_to_bar(14.696, "psi") == pytest.approx(1.01325, rel=1e-3)

    def test_temperature_kelvin_to_celsius(self):
        assert temperature_to_celsius(373.15, "K") == pytest.approx(100.0)

    def test_mass_flow_kg_s_to_ton_hr(self):
        assert mass_flow_to_ton_hr(10.0, "kg/s") == pytest.approx(36.0)

    def test_convert_generic(self):
        assert convert(1.0, "bar", "mbar") == pytest.approx(1000.0)


class TestValidation:
    def test_validate_positive(self):
        result = ValidationResult()
        assert not validate_positive("flow", 0.0, result)
        assert not result.is_valid
        assert "flow must be positive" in result.errors[0].message

    def test_validate_non_negative_ignores_none(self):
        result = ValidationResult()
        validate_non_negative("flow", None, result)
        validate_non_negative("flow", 0.0, result)
        assert result.is_valid

    def test_validate_range(self):
        result = ValidationResult()
        validate_range("T", 400, 0, 350, result, unit="°C")
        assert result.errors[0].parameter == "T"
        assert result.errors[0].limit == (0, 350)
        assert "350" in result.errors[0].message

    def test_error_joins_messages(self):
        result = ValidationResult()
        result.error("a", "first problem")
        result.error("b", "second problem")
        with pytest.raises(ValidationError, match="first problem; second problem") as exc:
            result.raise_if_invalid()
        assert exc.value.result is result
        assert isinstance(exc.value, ValueError)

    def test_valid_result_does_not_raise(self):
        ValidationResult().raise_if_invalid()

    def test_warning_to_dict(self):
        w = CalculationWarning(WarningCategory.FLASHING, "hot spray")
        assert w.to_dict() == {"category": "flashing", "message": "hot spray"}
