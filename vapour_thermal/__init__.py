"""Vapour Thermal — process calculation engine for steam and desalination plant sizing."""

__app_name__ = "vapour-thermal"
__version__ = "0.1.0"
