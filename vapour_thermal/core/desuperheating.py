"""Desuperheater spray-water sizing.

Superheated steam is cooled toward saturation by injecting spray water.
Adiabatic mixing gives the spray water needed to reach the target state:

    m_s · h_steam + m_w · h_water = (m_s + m_w) · h_target

    m_w / m_s = (h_steam - h_target) / (h_target - h_water)

Flows are in tonne/h, enthalpies in kJ/kg, heat in kW.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from vapour_thermal.core.config import DEFAULT_SETTINGS, EngineSettings
from vapour_thermal.core.steam import SteamPropertyProvider, get_default_provider
from vapour_thermal.utils.units import ton_hr_to_kg_s
from vapour_thermal.utils.validation import (
    CalculationWarning,
    ValidationResult,
    WarningCategory,
    validate_positive,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThermalConditions:
    """A temperature / absolute pressure pair."""

    temperature_c: float
    pressure_bar: float


@dataclass(frozen=True)
class DesuperheatingInput:
    """Steam inlet state, outlet target and spray water for a desuperheater."""

    steam_pressure_bar: float  # bar abs
    steam_temperature_c: float  # °C
    target_temperature_c: float  # °C
    spray_water_temperature_c: float  # °C
    steam_flow_ton_hr: float  # t/h

    @property
    def inlet(self) -> ThermalConditions:
        return ThermalConditions(self.steam_temperature_c, self.steam_pressure_bar)

    @property
    def outlet(self) -> ThermalConditions:
        return ThermalConditions(self.target_temperature_c, self.steam_pressure_bar)


@dataclass(frozen=True)
class DesuperheatingResult:
    """Spray-water requirement and the enthalpies it was derived from."""

    inputs: DesuperheatingInput
    saturation_temperature: float  # °C at steam pressure
    steam_enthalpy: float  # kJ/kg
    target_enthalpy: float  # kJ/kg
    spray_water_enthalpy: float  # kJ/kg
    water_to_steam_ratio: float  # kg water / kg steam
    spray_water_flow: float  # t/h
    total_outlet_flow: float  # t/h
    heat_removed: float  # kW
    degrees_of_superheat: float  # K, inlet
    outlet_superheat: float  # K, outlet (0 when saturated)
    warnings: tuple[CalculationWarning, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["warnings"] = [w.to_dict() for w in self.warnings]
        return data


class DesuperheatingCalculator:
    """Energy/mass balance for a spray desuperheater.

    Args:
        provider: Steam property source. Defaults to the CoolProp IF97
                  provider selected by ``settings.steam_backend``.
        settings: Warning thresholds; defaults to :data:`DEFAULT_SETTINGS`.
    """

    def __init__(
        self,
        provider: SteamPropertyProvider | None = None,
        settings: EngineSettings | None = None,
    ):
        self.settings = settings or DEFAULT_SETTINGS
        self.provider = provider or get_default_provider(self.settings.steam_backend)

    def validate(self, inp: DesuperheatingInput) -> float:
        """Check the input; return Tsat at the steam pressure.

        Raises:
            ValidationError: Listing every violated constraint.
        """
        result = ValidationResult()
        t_sat = float("nan")

        if validate_positive("Steam pressure", inp.steam_pressure_bar, result):
            t_sat = self.provider.saturation_temperature(inp.steam_pressure_bar)
            if not self.provider.is_superheated(inp.steam_pressure_bar, inp.steam_temperature_c):
                result.error(
                    "steam_temperature_c",
                    f"Steam must be superheated at the inlet: {inp.steam_temperature_c} °C "
                    f"is not above Tsat = {t_sat:.2f} °C at {inp.steam_pressure_bar} bar",
                    value=inp.steam_temperature_c,
                    limit=t_sat,
                )
            if inp.target_temperature_c < t_sat:
                result.error(
                    "target_temperature_c",
                    f"Target temperature {inp.target_temperature_c} °C cannot be below "
                    f"saturation ({t_sat:.2f} °C)",
                    value=inp.target_temperature_c,
                    limit=t_sat,
                )

        if inp.target_temperature_c >= inp.steam_temperature_c:
            result.error(
                "target_temperature_c",
                f"Target temperature {inp.target_temperature_c} °C must be below inlet "
                f"temperature ({inp.steam_temperature_c} °C)",
                value=inp.target_temperature_c,
                limit=inp.steam_temperature_c,
            )

        validate_positive("Steam flow", inp.steam_flow_ton_hr, result)
        result.raise_if_invalid()
        return t_sat

    def calculate(self, inp: DesuperheatingInput) -> DesuperheatingResult:
        """Size the spray water for *inp*.

        Raises:
            ValidationError: If the input is outside the physical domain.
        """
        t_sat = self.validate(inp)
        inlet, outlet = inp.inlet, inp.outlet
        warnings: list[CalculationWarning] = []

        h_steam = self.provider.enthalpy_superheated(inlet.pressure_bar, inlet.temperature_c)
        if outlet.temperature_c - t_sat <= self.settings.saturated_band_c:
            h_target = self.provider.enthalpy_vapour(t_sat)
        else:
            h_target = self.provider.enthalpy_superheated(
                outlet.pressure_bar, outlet.temperature_c
            )
        h_water = self.provider.enthalpy_liquid(inp.spray_water_temperature_c)

        if h_target - h_water <= 0:
            check = ValidationResult()
            check.error(
                "spray_water_temperature_c",
                f"Spray water enthalpy ({h_water:.2f} kJ/kg) must be below the target "
                f"enthalpy ({h_target:.2f} kJ/kg)",
                value=h_water,
                limit=h_target,
            )
            check.raise_if_invalid()

        ratio = (h_steam - h_target) / (h_target - h_water)
        spray_flow = inp.steam_flow_ton_hr * ratio
        total_flow = inp.steam_flow_ton_hr + spray_flow
        heat_removed = ton_hr_to_kg_s(inp.steam_flow_ton_hr) * (h_steam - h_target)

        if inp.spray_water_temperature_c >= t_sat:
            warnings.append(
                CalculationWarning(
                    WarningCategory.FLASHING,
                    f"Spray water at {inp.spray_water_temperature_c} °C is at or above "
                    f"saturation ({t_sat:.2f} °C) — risk of flashing",
                )
            )
        if ratio > self.settings.high_spray_ratio:
            warnings.append(
                CalculationWarning(
                    WarningCategory.HIGH_SPRAY_RATIO,
                    f"High water-to-steam ratio ({ratio:.3f}) — verify nozzle sizing",
                )
            )
        for w in warnings:
            logger.info("Desuperheating: %s", w.message)

        result = DesuperheatingResult(
            inputs=inp,
            saturation_temperature=t_sat,
            steam_enthalpy=h_steam,
            target_enthalpy=h_target,
            spray_water_enthalpy=h_water,
            water_to_steam_ratio=ratio,
            spray_water_flow=spray_flow,
            total_outlet_flow=total_flow,
            heat_removed=heat_removed,
            degrees_of_superheat=inlet.temperature_c - t_sat,
            outlet_superheat=max(outlet.temperature_c - t_sat, 0.0),
            warnings=tuple(warnings),
        )
        logger.debug(
            "Desuperheating at %.3f bar: ratio=%.5f, spray=%.4f t/h, Q=%.2f kW",
            inlet.pressure_bar,
            ratio,
            spray_flow,
            heat_removed,
        )
        return result


def calculate_desuperheating(
    inp: DesuperheatingInput,
    provider: SteamPropertyProvider | None = None,
    settings: EngineSettings | None = None,
) -> DesuperheatingResult:
    """Convenience wrapper around :class:`DesuperheatingCalculator`."""
    return DesuperheatingCalculator(provider, settings).calculate(inp)
