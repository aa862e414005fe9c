"""Dissolved gas content of seawater — Weiss (1970) correlation.

Gives the O2 and N2 dissolved in seawater at equilibrium with moist air,
which is the non-condensable gas a desalination plant releases when the
feed is heated or flashed under vacuum.

    ln C = A1 + A2/tau + A3·ln(tau) + A4·tau + S·(B1 + B2·tau + B3·tau²)

with tau = T[K]/100, S the salinity [g/kg] and C in mL(STP)/L.

Reference:
    Weiss R.F. (1970). "The solubility of nitrogen, oxygen and argon in
    water and seawater." Deep-Sea Research 17, 721–735.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

from vapour_thermal.utils.constants import M_N2, M_O2, MOLAR_VOLUME_STP, T_CELSIUS_OFFSET

logger = logging.getLogger(__name__)

WEISS_O2_A = (-173.4292, 249.6339, 143.3483, -21.8492)
WEISS_O2_B = (-0.033096, 0.014259, -0.0017)
WEISS_N2_A = (-172.4965, 248.4262, 143.0738, -21.712)
WEISS_N2_B = (-0.049781, 0.025018, -0.0034861)

# Fitted range of the correlation
VALID_TEMPERATURE_C = (0.0, 36.0)
VALID_SALINITY_GKG = (0.0, 40.0)
# Evaluation clamp; above 80 °C the dissolved gas is negligible anyway
_CLAMP_TEMPERATURE_C = (0.0, 80.0)

O2_MG_PER_ML_STP = M_O2 / MOLAR_VOLUME_STP
N2_MG_PER_ML_STP = M_N2 / MOLAR_VOLUME_STP


@dataclass(frozen=True)
class SeawaterGasInfo:
    """Dissolved gas in seawater at air saturation."""

    gas_temp_c: float  # °C — temperature the correlation was evaluated at
    salinity_gkg: float  # g/kg
    o2_ml_l: float  # mL(STP)/L
    n2_ml_l: float  # mL(STP)/L
    o2_mg_l: float  # mg/L
    n2_mg_l: float  # mg/L
    total_gas_mg_l: float  # mg/L
    extrapolated: bool  # True outside the fitted T/S range

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def weiss_concentration(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float],
    temperature_c: float,
    salinity_gkg: float,
) -> float:
    """Evaluate the Weiss (1970) fit; returns mL(STP) of gas per L of seawater."""
    tau = (temperature_c + T_CELSIUS_OFFSET) / 100.0
    ln_c = (
        a[0]
        + a[1] / tau
        + a[2] * math.log(tau)
        + a[3] * tau
        + salinity_gkg * (b[0] + b[1] * tau + b[2] * tau * tau)
    )
    return math.exp(ln_c)


def is_extrapolated(temperature_c: float, salinity_gkg: float) -> bool:
    """True when (T, S) lies outside the range Weiss fitted."""
    t_lo, t_hi = VALID_TEMPERATURE_C
    s_lo, s_hi = VALID_SALINITY_GKG
    return not (t_lo <= temperature_c <= t_hi and s_lo <= salinity_gkg <= s_hi)


def dissolved_gas_content(temperature_c: float, salinity_gkg: float = 35.0) -> SeawaterGasInfo:
    """Dissolved O2 and N2 in air-saturated seawater.

    Out-of-range inputs are evaluated anyway and flagged with
    ``extrapolated=True``; the temperature is clamped to 0–80 °C first.

    Args:
        temperature_c: Seawater temperature at gas release [°C].
        salinity_gkg: Salinity [g/kg].

    Returns:
        SeawaterGasInfo with concentrations in mL(STP)/L and mg/L.
    """
    extrapolated = is_extrapolated(temperature_c, salinity_gkg)
    t_calc = min(max(temperature_c, _CLAMP_TEMPERATURE_C[0]), _CLAMP_TEMPERATURE_C[1])
    if extrapolated:
        logger.info(
            "Weiss correlation extrapolated at T=%.2f °C, S=%.2f g/kg (evaluated at %.2f °C)",
            temperature_c,
            salinity_gkg,
            t_calc,
        )

    o2_ml_l = weiss_concentration(WEISS_O2_A, WEISS_O2_B, t_calc, salinity_gkg)
    n2_ml_l = weiss_concentration(WEISS_N2_A, WEISS_N2_B, t_calc, salinity_gkg)
    o2_mg_l = o2_ml_l * O2_MG_PER_ML_STP
    n2_mg_l = n2_ml_l * N2_MG_PER_ML_STP

    return SeawaterGasInfo(
        gas_temp_c=t_calc,
        salinity_gkg=salinity_gkg,
        o2_ml_l=o2_ml_l,
        n2_ml_l=n2_ml_l,
        o2_mg_l=o2_mg_l,
        n2_mg_l=n2_mg_l,
        total_gas_mg_l=o2_mg_l + n2_mg_l,
        extrapolated=extrapolated,
    )
