from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union

import pandas as pd

from .coercion import normalise_outcome, normalise_sex, to_flag, to_number
from .exceptions import LoadError
from .record_store import Record
from .schema import DEFAULT_SCHEMA, Schema

logger = logging.getLogger(__name__)


def resolve_data_path(path: Union[str, Path]) -> Path:
    """
    Resolve a relative dataset path against HF_BROWSER_DATA_ROOT when set.

    Absolute paths are returned unchanged.
    """
    path = Path(path)
    if path.is_absolute():
        return path

    data_root = os.environ.get("HF_BROWSER_DATA_ROOT")
    if not data_root:
        return path

    resolved = Path(data_root) / path
    # Fallback for redundant 'data/' prefix
    if not resolved.is_file() and path.parts and path.parts[0] == "data":
        alt = Path(data_root) / Path(*path.parts[1:])
        if alt.is_file():
            resolved = alt
    return resolved


def _read_frame(path: Path) -> pd.DataFrame:
    try:
        # Rows with the wrong number of cells are skipped, not fatal
        df = pd.read_csv(path, dtype=str, keep_default_na=False, on_bad_lines="skip")
    except FileNotFoundError:
        raise LoadError(LoadError.REASON_NOT_FOUND, f"Cannot load {path} (file not found)", str(path))
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise LoadError(LoadError.REASON_MALFORMED, f"Cannot parse {path}: {e}", str(path))
    except OSError as e:
        raise LoadError(LoadError.REASON_UNREADABLE, f"Cannot read {path}: {e}", str(path))

    df.columns = [str(c).strip() for c in df.columns]
    return df


def _label_column(df: pd.DataFrame, label_field: str, raw_field: Optional[str], path: Path) -> str:
    if label_field in df.columns:
        return label_field
    if raw_field and raw_field in df.columns:
        logger.info(
            "Label column missing; deriving from raw column",
            extra={"label_field": label_field, "raw_field": raw_field, "path": str(path)},
        )
        return raw_field
    raise LoadError(
        LoadError.REASON_MALFORMED,
        f"Dataset {path} has neither '{label_field}' nor '{raw_field}' column",
        str(path),
    )


def _to_record(row: Dict[str, Any], schema: Schema, sex_col: str, outcome_col: str) -> Record:
    record: Dict[str, Any] = {}
    for name in schema.numeric_fields:
        record[name] = to_number(row.get(name))
    record[schema.sex_field] = normalise_sex(row.get(sex_col))
    record[schema.outcome_field] = normalise_outcome(row.get(outcome_col))
    for column in schema.condition_flags.values():
        record[column] = to_flag(row.get(column))
    return MappingProxyType(record)


def load_records(source: Union[str, Path], schema: Schema = DEFAULT_SCHEMA) -> Tuple[Record, ...]:
    """
    Read a CSV dataset and coerce every row to a schema-shaped record.

    - numeric fields become floats, or None when missing/unparseable
    - sex/outcome become the normalised labels (derived from the raw 0/1
      columns when the label columns are absent)
    - condition flags become 0/1, or None

    :param source: path to the CSV file
    :param schema: field declaration
    :return: tuple of read-only records
    :raises LoadError: reason "not_found" or "malformed"
    """
    path = resolve_data_path(source)
    if not path.is_file():
        raise LoadError(LoadError.REASON_NOT_FOUND, f"Cannot load {path} (file not found)", str(path))

    df = _read_frame(path)

    sex_col = _label_column(df, schema.sex_field, schema.raw_sex_field, path)
    outcome_col = _label_column(df, schema.outcome_field, schema.raw_outcome_field, path)

    missing: List[str] = [
        c for c in list(schema.numeric_fields) + list(schema.condition_flags.values())
        if c not in df.columns
    ]
    if missing:
        logger.warning(
            "Dataset is missing schema columns; values will be absent",
            extra={"path": str(path), "missing": missing},
        )

    records = tuple(
        _to_record(row, schema, sex_col, outcome_col)
        for row in df.to_dict("records")
    )

    logger.info("Records ingested", extra={"path": str(path), "n_rows": len(records)})
    return records
