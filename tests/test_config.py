"""Tests for configuration loading and overrides."""

import json

import pytest

from internship_matcher.utils import Config


def test_defaults_without_file(tmp_path):
    config = Config(str(tmp_path / "config.json"))

    assert config.get_recommendation_limit() == 10
    assert config.get_bulk_max() == 50
    assert config.is_parallel() is False
    assert config.get_log_level() == "WARNING"
    assert config.get("matching.missing", "fallback") == "fallback"


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"matching": {"recommendation_limit": 5}, "logging": {"level": "debug"}}))

    config = Config(str(path))

    assert config.get_recommendation_limit() == 5
    assert config.get_bulk_max() == 50
    assert config.get_log_level() == "DEBUG"


def test_defaults_are_not_shared(tmp_path):
    first = Config(str(tmp_path / "a.json"))
    first.set("matching.bulk_max", 10)

    assert Config(str(tmp_path / "b.json")).get_bulk_max() == 50


def test_set_and_save_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))
    config.set("catalog.url", "https://catalog.test/internships")
    config.save()

    assert Config(str(path)).get_catalog_config()["url"] == "https://catalog.test/internships"


def test_api_key_environment_override(tmp_path, monkeypatch):
    monkeypatch.delenv("CATALOG_API_KEY", raising=False)
    config = Config(str(tmp_path / "config.json"))
    config.set("api_keys.catalog", "from-file")

    assert config.get_api_key("catalog") == "from-file"

    monkeypatch.setenv("CATALOG_API_KEY", "from-env")
    assert config.get_catalog_config()["api_key"] == "from-env"


def test_masked_config_hides_keys(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("api_keys.catalog", "abcdefghijkl")

    masked = config.masked()

    assert masked["api_keys"]["catalog"] == "abcd...ijkl"
    assert masked["catalog"]["url"] == ""


def test_unknown_log_level_is_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"logging": {"level": "loud"}}))

    with pytest.raises(ValueError, match="LOUD"):
        Config(str(path)).get_log_level()


def test_matching_switches_read_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"matching": {"max_workers": 2, "cap_per_requirement": True}}))

    config = Config(str(path))

    assert config.get_max_workers() == 2
    assert config.caps_per_requirement() is True
    assert config.masked()["api_keys"]["catalog"] == "(not set)"
