import json

import pytest

from hf_browser.config.loader import load_global_config
from hf_browser.core.exceptions import ConfigError


def _write_global(root, raw):
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(raw))


def test_load_global_config_resolves_paths(tmp_path):
    root = tmp_path / "config"
    _write_global(root, {
        "ui_title": "HF",
        "data_root": "../data",
        "data_file": "hf.csv",
        "default_x": "time",
        "default_y": "ejection_fraction",
        "y_to_zero": True,
    })

    cfg = load_global_config(root)

    assert cfg.ui_title == "HF"
    assert cfg.data_root == (tmp_path / "data").resolve()
    assert cfg.data_file == (tmp_path / "data" / "hf.csv").resolve()
    assert cfg.default_x == "time"
    assert cfg.default_y == "ejection_fraction"
    assert cfg.range_policy.y_to_zero is True


def test_defaults(tmp_path):
    _write_global(tmp_path, {})
    cfg = load_global_config(tmp_path)

    assert cfg.default_x == "serum_sodium"
    assert cfg.default_y == "age"
    assert cfg.y_to_zero is False
    assert cfg.data_file.name == "heart_failure_clinical_records_dataset_cleaned.csv"


def test_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_invalid_values_raise_config_error(tmp_path):
    _write_global(tmp_path, {"default_x": "sex_label"})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)

    _write_global(tmp_path, {"y_to_zero": "yes"})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
