"""Engine settings for Vapour Thermal.

Thresholds that decide when a calculator emits an advisory warning, plus
the steam property backend. Settings are plain dataclasses and can be
stored as JSON alongside a project.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Tunable limits shared by the calculators."""

    # Desuperheating: outlet within this many K of Tsat is treated as saturated
    saturated_band_c: float = 0.1
    # Desuperheating: water-to-steam ratio above which nozzle sizing is flagged
    high_spray_ratio: float = 0.3
    # NCG seawater mode: salinity used when the input gives none [g/kg]
    default_salinity_gkg: float = 35.0
    # CoolProp backend for the default steam provider
    steam_backend: str = "IF97"


DEFAULT_SETTINGS = EngineSettings()


def settings_from_dict(data: dict) -> EngineSettings:
    """Build settings from a mapping; unknown keys are rejected."""
    known = {f.name for f in fields(EngineSettings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown engine settings: {sorted(unknown)}")
    return EngineSettings(**data)


def save_settings(settings: EngineSettings, path: str | Path) -> None:
    """Write settings to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(asdict(settings), f, indent=2)
    logger.info("Saved engine settings to %s", path)


def load_settings(path: str | Path) -> EngineSettings:
    """Load settings from a JSON file. Missing keys keep their defaults."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    settings = settings_from_dict(data)
    logger.info("Loaded engine settings from %s", path)
    return settings
