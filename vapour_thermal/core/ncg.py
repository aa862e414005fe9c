"""Non-condensable gas (NCG) + water-vapour mixture properties.

Covers the vent and ejector streams of thermal desalination vacuum systems.
The mixture is an ideal gas; the NCG is dry-air equivalent
(M = 28.97 g/mol) and the water vapour sits at its saturation pressure
(Dalton's law) unless the total pressure is lower.

Four input modes, each a separate input type:

- ``seawater``    — NCG released from a seawater feed (Weiss 1970);
- ``dry_ncg``     — dry NCG mass flow given;
- ``wet_ncg``     — total NCG + vapour mass flow given;
- ``split_flows`` — both NCG and vapour flows given; pressure is derived.

The pressure of the first three is either the total pressure
(:class:`TotalPressure`) or the NCG partial pressure on top of the
saturation pressure (:class:`NCGPartialPressure`).
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from vapour_thermal.core.config import DEFAULT_SETTINGS, EngineSettings
from vapour_thermal.core.solubility import SeawaterGasInfo, dissolved_gas_content
from vapour_thermal.core.steam import SteamPropertyProvider, get_default_provider
from vapour_thermal.core.transport import (
    air_conductivity,
    air_viscosity,
    mason_saxena_conductivity,
    vapour_conductivity,
    vapour_viscosity,
    wilke_viscosity,
)
from vapour_thermal.utils.constants import (
    BAR_TO_PA,
    CP_AIR,
    CP_VAPOUR,
    M_AIR,
    M_H2O,
    R_UNIVERSAL,
    T_CELSIUS_OFFSET,
)
from vapour_thermal.utils.validation import (
    CalculationWarning,
    ValidationResult,
    WarningCategory,
    validate_non_negative,
    validate_positive,
    validate_range,
)

logger = logging.getLogger(__name__)

# IF97 saturation lookups fail at and just below the triple point (0.01 °C)
TEMPERATURE_RANGE_C = (0.1, 350.0)
# Below this NCG mole fraction the stream is treated as pure vapour
_MIN_NCG_FRACTION = 1e-9


class NCGMode(Enum):
    SEAWATER = "seawater"
    DRY_NCG = "dry_ncg"
    WET_NCG = "wet_ncg"
    SPLIT_FLOWS = "split_flows"


# --- Pressure specification ---


@dataclass(frozen=True)
class TotalPressure:
    """Absolute total pressure of the mixture [bar]."""

    bar: float


@dataclass(frozen=True)
class NCGPartialPressure:
    """NCG partial pressure [bar]; total = Psat(T) + bar."""

    bar: float


PressureSpec = Union[TotalPressure, NCGPartialPressure]


def pressure_spec(pressure_bar: float, use_sat_pressure: bool) -> PressureSpec:
    """Map a pressure value and a use-saturation-pressure flag onto a pressure specification."""
    if use_sat_pressure:
        return NCGPartialPressure(pressure_bar)
    return TotalPressure(pressure_bar)


# --- Inputs ---


@dataclass(frozen=True)
class _PressureInput:
    temperature_c: float
    pressure: PressureSpec

    @property
    def pressure_bar(self) -> float:
        return self.pressure.bar

    @property
    def use_sat_pressure(self) -> bool:
        return isinstance(self.pressure, NCGPartialPressure)


@dataclass(frozen=True)
class SeawaterNCGInput(_PressureInput):
    """NCG released from a seawater feed.

    ``seawater_temp_c`` defaults to the mixture temperature and
    ``salinity_gkg`` to the configured default salinity.
    """

    mode: ClassVar[NCGMode] = NCGMode.SEAWATER

    seawater_flow_m3h: float | None = None
    seawater_temp_c: float | None = None
    salinity_gkg: float | None = None


@dataclass(frozen=True)
class DryNCGInput(_PressureInput):
    """Dry NCG mass flow (no vapour included)."""

    mode: ClassVar[NCGMode] = NCGMode.DRY_NCG

    dry_ncg_flow_kg_h: float | None = None


@dataclass(frozen=True)
class WetNCGInput(_PressureInput):
    """Total NCG + vapour mass flow at the stated T and P."""

    mode: ClassVar[NCGMode] = NCGMode.WET_NCG

    wet_ncg_flow_kg_h: float | None = None


@dataclass(frozen=True)
class SplitFlowsNCGInput:
    """Known NCG and vapour flows; total pressure follows from Dalton's law."""

    mode: ClassVar[NCGMode] = NCGMode.SPLIT_FLOWS

    temperature_c: float
    dry_ncg_flow_kg_h: float
    vapour_flow_kg_h: float


NCGInput = Union[SeawaterNCGInput, DryNCGInput, WetNCGInput, SplitFlowsNCGInput]


# --- Results ---


@dataclass(frozen=True)
class NCGFlowBreakdown:
    dry_ncg_flow_kg_h: float
    water_vapour_flow_kg_h: float
    total_flow_kg_h: float
    volumetric_flow_m3h: float  # at T, P_total


@dataclass(frozen=True)
class NCGResult:
    """Thermophysical properties of an NCG + water-vapour mixture."""

    mode: NCGMode

    # Conditions
    temperature_c: float
    total_pressure_bar: float
    sat_pressure_bar: float
    water_vapour_partial_pressure_bar: float
    ncg_partial_pressure_bar: float

    # Composition
    water_vapour_mole_frac: float
    ncg_mole_frac: float
    water_vapour_mass_frac: float
    ncg_mass_frac: float
    mix_molar_mass: float  # g/mol

    # Bulk properties
    density: float  # kg/m³
    specific_volume: float  # m³/kg
    specific_enthalpy: float  # kJ/kg, ref. liquid water and dry air at 0 °C
    vapour_enthalpy: float  # kJ/kg, h_g(T)
    air_enthalpy: float  # kJ/kg, Cp_air · T
    cp_mix: float  # kJ/(kg·K)
    cv_mix: float  # kJ/(kg·K)
    gamma_mix: float

    # Transport properties
    dynamic_viscosity: float  # Pa·s
    thermal_conductivity: float  # W/(m·K)

    flows: NCGFlowBreakdown | None = None
    seawater_info: SeawaterGasInfo | None = None
    warnings: tuple[CalculationWarning, ...] = ()

    @property
    def prandtl(self) -> float:
        return self.cp_mix * 1000.0 * self.dynamic_viscosity / self.thermal_conductivity

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        data["warnings"] = [w.to_dict() for w in self.warnings]
        return data


@dataclass(frozen=True)
class _Composition:
    total_pressure_bar: float
    water_pp_bar: float
    ncg_pp_bar: float
    y_water: float
    y_ncg: float


class NCGCalculator:
    """Ideal-gas property calculator for NCG / water-vapour mixtures.

    Args:
        provider: Steam property source. Defaults to the CoolProp IF97
                  provider selected by ``settings.steam_backend``.
        settings: Engine settings; defaults to :data:`DEFAULT_SETTINGS`.
    """

    def __init__(
        self,
        provider: SteamPropertyProvider | None = None,
        settings: EngineSettings | None = None,
    ):
        self.settings = settings or DEFAULT_SETTINGS
        self.provider = provider or get_default_provider(self.settings.steam_backend)

    # --- Validation and composition ---

    def _resolve_composition(self, inp: NCGInput, p_sat: float) -> _Composition:
        result = ValidationResult()

        if isinstance(inp, SplitFlowsNCGInput):
            validate_non_negative("dry_ncg_flow_kg_h", inp.dry_ncg_flow_kg_h, result)
            if inp.vapour_flow_kg_h is None or inp.vapour_flow_kg_h <= 0:
                result.error(
                    "vapour_flow_kg_h",
                    f"Water vapour flow must be positive in split-flows mode, "
                    f"got {inp.vapour_flow_kg_h}",
                )
            result.raise_if_invalid()

            n_ncg = inp.dry_ncg_flow_kg_h / M_AIR
            n_water = inp.vapour_flow_kg_h / M_H2O
            y_water = n_water / (n_ncg + n_water)
            y_ncg = n_ncg / (n_ncg + n_water)
            # Dalton: y_water = Psat / P_total
            p_total = p_sat / y_water
            return _Composition(p_total, p_sat, p_total - p_sat, y_water, y_ncg)

        if isinstance(inp, SeawaterNCGInput):
            validate_non_negative("seawater_flow_m3h", inp.seawater_flow_m3h, result)
            validate_non_negative("salinity_gkg", inp.salinity_gkg, result)
        elif isinstance(inp, DryNCGInput):
            validate_non_negative("dry_ncg_flow_kg_h", inp.dry_ncg_flow_kg_h, result)
        elif isinstance(inp, WetNCGInput):
            validate_non_negative("wet_ncg_flow_kg_h", inp.wet_ncg_flow_kg_h, result)
        else:
            raise TypeError(f"Unsupported NCG input type: {type(inp).__name__}")

        if not validate_positive("Pressure", inp.pressure.bar, result):
            result.raise_if_invalid()

        if isinstance(inp.pressure, NCGPartialPressure):
            p_total = p_sat + inp.pressure.bar
        else:
            p_total = inp.pressure.bar
            if p_total < p_sat:
                result.error(
                    "pressure",
                    f"Total pressure ({p_total:.4f} bar) is below the saturation pressure "
                    f"at {inp.temperature_c} °C ({p_sat:.4f} bar)",
                    value=p_total,
                    limit=p_sat,
                )
        result.raise_if_invalid()

        water_pp = min(p_sat, p_total)
        y_water = water_pp / p_total
        return _Composition(p_total, water_pp, p_total - water_pp, y_water, 1.0 - y_water)

    # --- Flow breakdown ---

    def _flows(
        self,
        inp: NCGInput,
        x_water: float,
        x_ncg: float,
        y_ncg: float,
        density: float,
        warnings: list[CalculationWarning],
    ) -> tuple[NCGFlowBreakdown | None, SeawaterGasInfo | None]:
        seawater_info = None
        dry = vapour = None

        if isinstance(inp, SeawaterNCGInput):
            if inp.seawater_flow_m3h:
                gas_temp = (
                    inp.temperature_c if inp.seawater_temp_c is None else inp.seawater_temp_c
                )
                salinity = (
                    self.settings.default_salinity_gkg
                    if inp.salinity_gkg is None
                    else inp.salinity_gkg
                )
                seawater_info = dissolved_gas_content(gas_temp, salinity)
                if seawater_info.extrapolated:
                    warnings.append(
                        CalculationWarning(
                            WarningCategory.EXTRAPOLATION,
                            f"Dissolved gas correlation extrapolated beyond its fitted range "
                            f"(T = {gas_temp} °C, S = {salinity} g/kg)",
                        )
                    )
                # m³/h × mg/L × 1000 L/m³ × 1e-6 kg/mg
                dry = seawater_info.total_gas_mg_l * inp.seawater_flow_m3h * 1e-3
                vapour = self._vapour_with(dry, x_water, x_ncg, y_ncg, warnings)
        elif isinstance(inp, DryNCGInput):
            if inp.dry_ncg_flow_kg_h:
                dry = inp.dry_ncg_flow_kg_h
                vapour = self._vapour_with(dry, x_water, x_ncg, y_ncg, warnings)
        elif isinstance(inp, WetNCGInput):
            if inp.wet_ncg_flow_kg_h:
                dry = inp.wet_ncg_flow_kg_h * x_ncg
                vapour = inp.wet_ncg_flow_kg_h * x_water
        elif isinstance(inp, SplitFlowsNCGInput):
            dry = inp.dry_ncg_flow_kg_h
            vapour = inp.vapour_flow_kg_h
            if y_ncg <= _MIN_NCG_FRACTION:
                warnings.append(
                    CalculationWarning(
                        WarningCategory.LOW_NCG_FRACTION,
                        "NCG fraction is negligible; the stream is effectively pure vapour",
                    )
                )
        else:
            raise TypeError(f"Unsupported NCG input type: {type(inp).__name__}")

        if dry is None or vapour is None:
            return None, seawater_info
        total = dry + vapour
        breakdown = NCGFlowBreakdown(
            dry_ncg_flow_kg_h=dry,
            water_vapour_flow_kg_h=vapour,
            total_flow_kg_h=total,
            volumetric_flow_m3h=total / density,
        )
        return breakdown, seawater_info

    @staticmethod
    def _vapour_with(
        dry: float,
        x_water: float,
        x_ncg: float,
        y_ncg: float,
        warnings: list[CalculationWarning],
    ) -> float:
        """Vapour flow carried along with *dry* kg/h of NCG."""
        if y_ncg > _MIN_NCG_FRACTION:
            return dry * (x_water / x_ncg)
        warnings.append(
            CalculationWarning(
                WarningCategory.LOW_NCG_FRACTION,
                "NCG fraction is negligible; vapour flow cannot be derived from the NCG flow",
            )
        )
        return 0.0

    # --- Main entry point ---

    def calculate(self, inp: NCGInput) -> NCGResult:
        """Compute mixture properties for *inp*.

        Raises:
            ValidationError: If the conditions are physically invalid.
            TypeError: If *inp* is not one of the NCG input types.
        """
        check = ValidationResult()
        validate_range("Temperature", inp.temperature_c, *TEMPERATURE_RANGE_C, check, unit="°C")
        check.raise_if_invalid()

        T = inp.temperature_c
        T_K = T + T_CELSIUS_OFFSET
        p_sat = self.provider.saturation_pressure(T)
        comp = self._resolve_composition(inp, p_sat)
        warnings: list[CalculationWarning] = []

        # Composition
        m_mix = comp.y_water * M_H2O + comp.y_ncg * M_AIR  # g/mol
        x_water = comp.y_water * M_H2O / m_mix
        x_ncg = comp.y_ncg * M_AIR / m_mix

        # Ideal gas: rho = P·M / (R·T), M in kg/mol
        density = comp.total_pressure_bar * BAR_TO_PA * (m_mix * 1e-3) / (R_UNIVERSAL * T_K)

        # Enthalpy, mass-weighted
        h_vapour = self.provider.enthalpy_vapour(T)
        h_air = CP_AIR * T
        h_mix = x_water * h_vapour + x_ncg * h_air

        # Specific heats; R [J/(mol·K)] / M [g/mol] is already kJ/(kg·K)
        cp_mix = x_water * CP_VAPOUR + x_ncg * CP_AIR
        cv_water = CP_VAPOUR - R_UNIVERSAL / M_H2O
        cv_air = CP_AIR - R_UNIVERSAL / M_AIR
        cv_mix = x_water * cv_water + x_ncg * cv_air

        # Transport, components ordered (NCG, vapour)
        y = (comp.y_ncg, comp.y_water)
        molar_masses = (M_AIR, M_H2O)
        mu = (air_viscosity(T), vapour_viscosity(T))
        k = (air_conductivity(T), vapour_conductivity(T))
        viscosity = wilke_viscosity(y, mu, molar_masses)
        conductivity = mason_saxena_conductivity(y, k, mu, molar_masses)

        flows, seawater_info = self._flows(inp, x_water, x_ncg, comp.y_ncg, density, warnings)
        for w in warnings:
            logger.info("NCG properties: %s", w.message)

        result = NCGResult(
            mode=inp.mode,
            temperature_c=T,
            total_pressure_bar=comp.total_pressure_bar,
            sat_pressure_bar=p_sat,
            water_vapour_partial_pressure_bar=comp.water_pp_bar,
            ncg_partial_pressure_bar=comp.ncg_pp_bar,
            water_vapour_mole_frac=comp.y_water,
            ncg_mole_frac=comp.y_ncg,
            water_vapour_mass_frac=x_water,
            ncg_mass_frac=x_ncg,
            mix_molar_mass=m_mix,
            density=density,
            specific_volume=1.0 / density,
            specific_enthalpy=h_mix,
            vapour_enthalpy=h_vapour,
            air_enthalpy=h_air,
            cp_mix=cp_mix,
            cv_mix=cv_mix,
            gamma_mix=cp_mix / cv_mix,
            dynamic_viscosity=viscosity,
            thermal_conductivity=conductivity,
            flows=flows,
            seawater_info=seawater_info,
            warnings=tuple(warnings),
        )
        logger.debug(
            "NCG %s at %.2f °C, %.5f bar: y_w=%.4f, rho=%.5f kg/m³",
            inp.mode.value,
            T,
            comp.total_pressure_bar,
            comp.y_water,
            density,
        )
        return result


def calculate_ncg_properties(
    inp: NCGInput,
    provider: SteamPropertyProvider | None = None,
    settings: EngineSettings | None = None,
) -> NCGResult:
    """Convenience wrapper around :class:`NCGCalculator`."""
    return NCGCalculator(provider, settings).calculate(inp)
