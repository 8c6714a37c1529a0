from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from hf_browser.config.model import GlobalConfig
from hf_browser.core.exceptions import ConfigError
from hf_browser.core.schema import DEFAULT_SCHEMA, Schema

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "data/heart_failure_clinical_records_dataset_cleaned.csv"


def _resolve(root: Path, raw: str) -> Path:
    path = Path(raw)
    return path if path.is_absolute() else (root / path).resolve()


def parse_global_config(raw: Dict[str, Any], root: Path, schema: Schema = DEFAULT_SCHEMA) -> GlobalConfig:
    """
    Validate a raw global.json mapping and build a GlobalConfig.

    Relative data_root is resolved against the config root; a relative data_file
    against data_root when given, otherwise against the config root.

    :raises ConfigError: if an axis default is not a numeric field or a value has the wrong type
    """
    if not isinstance(raw, dict):
        raise ConfigError("global.json must contain a JSON object")

    data_root_raw = raw.get("data_root")
    data_root = _resolve(root, data_root_raw) if data_root_raw else None

    data_file_raw = raw.get("data_file", DEFAULT_DATA_FILE)
    if not isinstance(data_file_raw, str) or not data_file_raw:
        raise ConfigError("'data_file' must be a non-empty string")
    data_file = _resolve(data_root or root, data_file_raw)

    default_x = raw.get("default_x", "serum_sodium")
    default_y = raw.get("default_y", "age")
    for key, value in (("default_x", default_x), ("default_y", default_y)):
        if not schema.is_numeric(value):
            raise ConfigError(
                f"'{key}'='{value}' is not a numeric field. Available: {list(schema.numeric_fields)}"
            )

    y_to_zero = raw.get("y_to_zero", False)
    if not isinstance(y_to_zero, bool):
        raise ConfigError("'y_to_zero' must be true or false")

    return GlobalConfig(
        ui_title=raw.get("ui_title", "Heart Failure Explorer"),
        subtitle=raw.get("subtitle", "Heart Failure Clinical Records Explorer"),
        data_file=data_file,
        default_x=default_x,
        default_y=default_y,
        y_to_zero=y_to_zero,
        data_root=data_root,
    )


def load_global_config(root: Path, schema: Schema = DEFAULT_SCHEMA) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or has invalid values.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    config = parse_global_config(raw, root, schema)
    logger.info(
        "Global config loaded",
        extra={"data_file": str(config.data_file), "default_x": config.default_x, "default_y": config.default_y},
    )
    return config
