"""Tests for engine settings persistence."""

import json

import pytest

from vapour_thermal.core.config import (
    DEFAULT_SETTINGS,
    EngineSettings,
    load_settings,
    save_settings,
    settings_from_dict,
)


class TestEngineSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.saturated_band_c == 0.1
        assert DEFAULT_SETTINGS.high_spray_ratio == 0.3
        assert DEFAULT_SETTINGS.default_salinity_gkg == 35.0
        assert DEFAULT_SETTINGS.steam_backend == "IF97"

    def test_save_and_load(self, tmp_path):
        settings = EngineSettings(high_spray_ratio=0.25, steam_backend="HEOS")
        path = tmp_path / "settings.json"
        save_settings(settings, path)
        assert load_settings(path) == settings

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"default_salinity_gkg": 40.0}))
        loaded = load_settings(path)
        assert loaded.default_salinity_gkg == 40.0
        assert loaded.saturated_band_c == DEFAULT_SETTINGS.saturated_band_c

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="spray_ratio"):
            settings_from_dict({"spray_ratio": 0.2})
