import json

import pytest

from romancalc import NumeralConverter


@pytest.fixture
def converter():
    return NumeralConverter()


@pytest.fixture
def write_config(tmp_path):
    """Writes a config.json into tmp_path and returns its path."""

    def _write(**overrides):
        data = {"log_level": "INFO", "max_workers": 2, "case_insensitive": False}
        data.update(overrides)
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
