"""Tests for settings loading."""

import json
from pathlib import Path

from leathershop.config import Settings, load_settings


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings({})
        assert settings.log_level == "INFO"
        assert settings.default_currency == "ARS"
        assert settings.transaction_attempts == 5
        assert settings.initial_sequences == {}
        assert settings.data_dir == Settings().data_dir

    def test_config_file(self, tmp_path):
        path = tmp_path / "leathershop.json"
        path.write_text(json.dumps({
            "data_dir": str(tmp_path / "store"),
            "default_currency": "USD",
            "transaction_attempts": 2,
            "initial_sequences": {"productos": "10"},
        }))
        settings = load_settings({"LEATHERSHOP_CONFIG": str(path)})
        assert settings.data_dir == tmp_path / "store"
        assert settings.default_currency == "USD"
        assert settings.transaction_attempts == 2
        assert settings.initial_sequences == {"productos": 10}

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "leathershop.json"
        path.write_text(json.dumps({"data_dir": "/from/file", "log_level": "DEBUG"}))
        settings = load_settings({
            "LEATHERSHOP_CONFIG": str(path),
            "LEATHERSHOP_DATA_DIR": "/from/env",
            "LEATHERSHOP_LOG_LEVEL": "warning",
        })
        assert settings.data_dir == Path("/from/env")
        assert settings.log_level == "WARNING"
