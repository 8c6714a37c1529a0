from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .coercion import is_true_flag
from .filter_state import FilterConfig
from .record_store import Record
from .schema import DEFAULT_SCHEMA, Schema

logger = logging.getLogger(__name__)


def record_passes(record: Record, config: FilterConfig, schema: Schema = DEFAULT_SCHEMA) -> bool:
    """
    Conjunctive predicate for one record.

    - sex label must be in config.allowed_sex (empty set -> nothing passes)
    - outcome label must be in config.allowed_outcome (empty set -> nothing passes)
    - every required flag must be equivalent to true

    A record missing any of the fields it is tested on fails instead of raising.
    """
    sex = record.get(schema.sex_field)
    if sex is None or sex not in config.allowed_sex:
        return False

    outcome = record.get(schema.outcome_field)
    if outcome is None or outcome not in config.allowed_outcome:
        return False

    for flag in config.required_flags:
        column: Optional[str] = schema.flag_column(flag)
        if column is None or column not in record:
            return False
        if not is_true_flag(record[column]):
            return False

    return True


def filter_records(
        records: Iterable[Record],
        config: FilterConfig,
        schema: Schema = DEFAULT_SCHEMA,
) -> List[Record]:
    """
    Return the records that pass config, in input order.

    Pure: the input is not touched and the same records (not copies) are
    returned, so filtering the output again yields the same list.

    :param records: the ingested records
    :param config: the current filter snapshot
    :param schema: field declaration used to find sex/outcome/flag columns
    :return: the filtered records
    """
    unknown = [f for f in config.required_flags if schema.flag_column(f) is None]
    if unknown:
        logger.warning("Unknown condition flags required; no record can pass", extra={"flags": sorted(unknown)})

    return [r for r in records if record_passes(r, config, schema)]
