"""Physical constants used throughout Vapour Thermal.

SI units unless noted. Molar masses are in g/mol and specific heats in
kJ/(kg·K), matching the engineering units the calculators report in.
"""

# Universal constants
R_UNIVERSAL = 8.31446261815324  # J/(mol·K) — universal gas constant

# Gravitational
GRAVITY = 9.81  # m/s² — used for pressure/head conversion

# Thermodynamic
T_CELSIUS_OFFSET = 273.15  # K
MOLAR_VOLUME_STP = 22.414  # L/mol — ideal gas at 0 °C, 1 atm

# Molar masses [g/mol]
M_H2O = 18.015
M_AIR = 28.97  # dry-air-equivalent NCG (N2 78.09 %, O2 20.95 %, Ar 0.93 %)
M_O2 = 32.0
M_N2 = 28.014

# Ideal-gas specific heats, nearly constant over 0–200 °C [kJ/(kg·K)]
CP_AIR = 1.005
CP_VAPOUR = 1.872

# Conversion factors
BAR_TO_PA = 1.0e5
PA_TO_BAR = 1.0e-5
KG_PER_TONNE = 1000.0
SECONDS_PER_HOUR = 3600.0
