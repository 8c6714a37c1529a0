from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .filter_engine import filter_records
from .filter_state import AxisSelection, FilterConfig
from .ranges import RangePolicy, ViewRange, compute_full_range
from .record_store import Record
from .schema import DEFAULT_SCHEMA, Schema
from .series import SeriesGroup, build_series


@dataclass(frozen=True)
class PipelineResult:
    """Output of one filter -> series -> range pass."""

    filtered: Tuple[Record, ...]
    groups: Tuple[SeriesGroup, ...]
    full_range: ViewRange


def run_pipeline(
        records: Iterable[Record],
        config: FilterConfig,
        axes: AxisSelection,
        schema: Schema = DEFAULT_SCHEMA,
        policy: RangePolicy = RangePolicy(),
) -> PipelineResult:
    """
    Filter the records, build the per-outcome series and their full range.

    Side-effect free, so it is safe to call on every control change.

    :raises SchemaError: if an axis is not a numeric schema field
    :raises NoDataError: if no plottable point survives
    """
    # Validate axes before filtering so a bad selection fails the same way
    # whether or not any record passes
    schema.require_numeric(axes.x)
    schema.require_numeric(axes.y)

    filtered: List[Record] = filter_records(records, config, schema)
    groups = build_series(filtered, axes, schema)
    full_range = compute_full_range(groups, policy)
    return PipelineResult(filtered=tuple(filtered), groups=tuple(groups), full_range=full_range)
