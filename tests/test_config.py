import json

import pytest

from romancalc.utils import Config, ConfigurationError, load_config
from romancalc.utils.config import default_config_path


def test_load_config_from_path(write_config):
    config = load_config(write_config(log_level="debug", max_workers=8))
    assert config == {"log_level": "DEBUG", "max_workers": 8, "case_insensitive": False}


def test_load_config_from_environment(write_config, monkeypatch):
    path = write_config(case_insensitive=True)
    monkeypatch.setenv("ROMANCALC_CONFIG", str(path))
    assert load_config()["case_insensitive"] is True


def test_project_config_is_valid(monkeypatch):
    monkeypatch.delenv("ROMANCALC_CONFIG", raising=False)
    assert default_config_path().name == "config.json"
    config = load_config()
    assert config["max_workers"] > 0


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        load_config(path)


def test_unknown_field(write_config):
    with pytest.raises(ConfigurationError, match="schema"):
        load_config(write_config(colour="red"))


def test_missing_field(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "INFO"}), encoding="utf-8")
    with pytest.raises(ConfigurationError, match="schema"):
        load_config(path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "LOUD"},
        {"max_workers": 0},
        {"max_workers": "4"},
        {"max_workers": True},
        {"case_insensitive": "yes"},
    ],
)
def test_invalid_values(write_config, overrides):
    with pytest.raises(ConfigurationError):
        load_config(write_config(**overrides))


def test_config_normalises_log_level():
    assert Config(log_level="warning", max_workers=1, case_insensitive=False).log_level == "WARNING"


def test_defaults_when_project_config_is_absent(tmp_path, monkeypatch):
    monkeypatch.delenv("ROMANCALC_CONFIG", raising=False)
    monkeypatch.setattr(
        "romancalc.utils.config.default_config_path", lambda: tmp_path / "config.json"
    )
    assert load_config() == {"log_level": "INFO", "max_workers": 4, "case_insensitive": False}


def test_explicit_missing_path_still_fails(tmp_path, monkeypatch):
    monkeypatch.setattr(
        "romancalc.utils.config.default_config_path", lambda: tmp_path / "config.json"
    )
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "other.json")
