"""Tests for Config parsing and ConfigManager loading."""

import json

import pytest

from portallib.config import ConfigManager
from portallib.models import Config
from portallib.models.config import DEFAULT_DATA_URL, DEFAULT_LAUNCH_URL


class TestConfig:
    """Test Config.from_dict."""

    def test_defaults(self):
        config = Config.default()
        assert config.data_url == DEFAULT_DATA_URL
        assert config.launch_url == DEFAULT_LAUNCH_URL
        assert config.theme == "textual-dark"
        assert config.timeout is None

    def test_values_are_read(self):
        config = Config.from_dict(
            {
                "data_url": "https://example.test/lib.json",
                "launch_url": "https://example.test/launch",
                "theme": "nord",
                "timeout": 5,
            }
        )
        assert config.data_url == "https://example.test/lib.json"
        assert config.launch_url == "https://example.test/launch"
        assert config.theme == "nord"
        assert config.timeout == 5.0

    def test_wrong_types_fall_back(self):
        config = Config.from_dict(
            {"data_url": 3, "launch_url": "", "theme": ["x"], "timeout": True}
        )
        assert config == Config.default()

    def test_non_positive_timeout_means_none(self):
        assert Config.from_dict({"timeout": 0}).timeout is None

    def test_non_object_rejected(self):
        with pytest.raises(ValueError):
            Config.from_dict(["nope"])


class TestConfigManager:
    """Test loading config.json from disk."""

    def test_missing_file_uses_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        assert manager.load() == Config.default()

    def test_loads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "dracula"}), encoding="utf-8")
        manager = ConfigManager(path)
        assert manager.load().theme == "dracula"

    def test_corrupted_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{oops", encoding="utf-8")
        assert ConfigManager(path).load() == Config.default()

    def test_non_object_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert ConfigManager(path).load() == Config.default()

    def test_result_is_cached(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "nord"}), encoding="utf-8")
        manager = ConfigManager(path)
        manager.load()
        path.write_text(json.dumps({"theme": "dracula"}), encoding="utf-8")
        assert manager.load().theme == "nord"
