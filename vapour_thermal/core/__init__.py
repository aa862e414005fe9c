"""Core calculation modules for Vapour Thermal.

This package contains the thermal process calculators:
- steam: Steam/water property provider contract (CoolProp IF97 implementation)
- desuperheating: Spray-water sizing by energy/mass balance
- ncg: Non-condensable gas + water-vapour mixture properties
- transport: Pure-gas correlations and Wilke / Mason-Saxena mixing rules
- solubility: Weiss (1970) dissolved O2/N2 in seawater
- config: Engine settings (warning thresholds, steam backend)
"""
