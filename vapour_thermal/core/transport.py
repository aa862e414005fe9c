"""Gas transport properties for NCG / water-vapour mixtures.

Pure-component correlations for dry air and low-pressure water vapour,
and the mixing rules that combine them:

- Wilke (1950) for dynamic viscosity;
- Wassiljewa (1904) with the Mason–Saxena (1958) interaction parameter
  for thermal conductivity.

Both rules are closed-form and take mole fractions, so they work for any
number of components even though the NCG calculator only ever mixes two.

References:
    Wilke C.R. (1950). J. Chem. Phys. 18(4), 517–519.
    Mason E.A., Saxena S.C. (1958). Phys. Fluids 1(5), 361–369.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from vapour_thermal.utils.constants import T_CELSIUS_OFFSET

_FRACTION_TOL = 1e-6


# --- Pure-component correlations ---


def air_viscosity(temperature_c: float) -> float:
    """Dynamic viscosity of dry air [Pa·s] (Sutherland's law, 0–500 °C).

    mu = C1 · T^1.5 / (T + S),  C1 = 1.458e-6,  S = 110.4 K
    """
    T = temperature_c + T_CELSIUS_OFFSET
    return 1.458e-6 * T**1.5 / (T + 110.4)


def vapour_viscosity(temperature_c: float) -> float:
    """Dynamic viscosity of low-pressure water vapour [Pa·s].

    Linear fit to NIST data, 0–300 °C.
    """
    return (0.407 * temperature_c + 80.4) * 1e-7


def air_conductivity(temperature_c: float) -> float:
    """Thermal conductivity of dry air [W/(m·K)], linear fit 0–200 °C."""
    return 0.02442 + 7.18e-5 * temperature_c


def vapour_conductivity(temperature_c: float) -> float:
    """Thermal conductivity of low-pressure water vapour [W/(m·K)], 0–300 °C."""
    return 0.01601 + 9.7e-5 * temperature_c


# --- Mixing rules ---


def _as_arrays(*columns: Sequence[float]) -> list[np.ndarray]:
    arrays = [np.asarray(c, dtype=float) for c in columns]
    n = arrays[0].shape
    if any(a.shape != n for a in arrays) or len(n) != 1 or n[0] == 0:
        raise ValueError("Mixing rule inputs must be non-empty 1-D sequences of equal length")
    return arrays


def _check_fractions(y: np.ndarray) -> None:
    if np.any(y < 0.0):
        raise ValueError(f"Mole fractions cannot be negative: {y.tolist()}")
    if not math.isclose(float(y.sum()), 1.0, abs_tol=_FRACTION_TOL):
        raise ValueError(f"Mole fractions must sum to 1, got {float(y.sum()):.9f}")


def wilke_interaction(mu: Sequence[float], molar_mass: Sequence[float]) -> np.ndarray:
    """Wilke interaction parameters phi_ij.

    phi_ij = [1 + sqrt(mu_i/mu_j) · (M_j/M_i)^0.25]^2 / sqrt(8 · (1 + M_i/M_j))

    Args:
        mu: Pure-component dynamic viscosities [Pa·s].
        molar_mass: Component molar masses (any consistent unit).

    Returns:
        Square matrix phi with phi[i, j] = phi_ij; the diagonal is 1.
    """
    mu_arr, m_arr = _as_arrays(mu, molar_mass)
    mu_i = mu_arr[:, None]
    mu_j = mu_arr[None, :]
    m_i = m_arr[:, None]
    m_j = m_arr[None, :]
    numerator = (1.0 + np.sqrt(mu_i / mu_j) * (m_j / m_i) ** 0.25) ** 2
    denominator = np.sqrt(8.0 * (1.0 + m_i / m_j))
    return numerator / denominator


def _mix(y: np.ndarray, prop: np.ndarray, phi: np.ndarray) -> float:
    # Components absent from the mixture contribute nothing
    present = y > 0.0
    y = y[present]
    prop = prop[present]
    phi = phi[np.ix_(present, present)]
    return float(np.sum(y * prop / (phi @ y)))


def wilke_viscosity(
    y: Sequence[float], mu: Sequence[float], molar_mass: Sequence[float]
) -> float:
    """Mixture dynamic viscosity by Wilke's rule.

    mu_mix = sum_i  y_i · mu_i / sum_j (y_j · phi_ij)

    Args:
        y: Mole fractions (sum to 1).
        mu: Pure-component viscosities [Pa·s].
        molar_mass: Component molar masses.

    Returns:
        Mixture viscosity [Pa·s].
    """
    y_arr, mu_arr, _ = _as_arrays(y, mu, molar_mass)
    _check_fractions(y_arr)
    return _mix(y_arr, mu_arr, wilke_interaction(mu_arr, molar_mass))


def mason_saxena_conductivity(
    y: Sequence[float],
    k: Sequence[float],
    mu: Sequence[float],
    molar_mass: Sequence[float],
) -> float:
    """Mixture thermal conductivity by the Wassiljewa / Mason–Saxena rule.

    Same structure as :func:`wilke_viscosity` applied to the pure-component
    conductivities; the interaction parameters come from the viscosities.

    Args:
        y: Mole fractions (sum to 1).
        k: Pure-component thermal conductivities [W/(m·K)].
        mu: Pure-component viscosities [Pa·s].
        molar_mass: Component molar masses.

    Returns:
        Mixture thermal conductivity [W/(m·K)].
    """
    y_arr, k_arr, mu_arr, _ = _as_arrays(y, k, mu, molar_mass)
    _check_fractions(y_arr)
    return _mix(y_arr, k_arr, wilke_interaction(mu_arr, molar_mass))
