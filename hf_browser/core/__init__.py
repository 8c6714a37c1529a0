"""
Core domain layer: schema, record store, filter engine, series builder,
range calculator and zoom/view state
"""

from .explorer import Explorer
from .filter_state import AxisSelection, ExploreState, FilterConfig
from .pipeline import PipelineResult, run_pipeline
from .ranges import RangePolicy, ViewRange
from .record_store import RecordStore, Status
from .schema import DEFAULT_SCHEMA, Schema
from .view_state import ViewState

__all__ = [
    "Explorer",
    "AxisSelection",
    "ExploreState",
    "FilterConfig",
    "PipelineResult",
    "run_pipeline",
    "RangePolicy",
    "ViewRange",
    "RecordStore",
    "Status",
    "DEFAULT_SCHEMA",
    "Schema",
    "ViewState",
]
