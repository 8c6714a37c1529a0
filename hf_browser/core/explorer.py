from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, Tuple

from .exceptions import NoDataError, SchemaError
from .filter_state import AxisSelection, ExploreState
from .pipeline import PipelineResult, run_pipeline
from .ranges import RangePolicy, ViewRange
from .record_store import RecordStore, Status
from .schema import field_label
from .series import SeriesGroup
from .view_state import ViewState

logger = logging.getLogger(__name__)


class RenderSink(Protocol):
    """
    Anything that can draw a snapshot. Called fire-and-forget; the return
    value is ignored and the sink must not be read back for state.
    """

    def __call__(
            self,
            groups: Sequence[SeriesGroup],
            display_range: ViewRange,
            labels: Tuple[str, str],
    ) -> None:
        ...


class Explorer:
    """
    Event-driven controller tying the record store, the pipeline and the view
    state together.

    Each control change arrives as an ExploreState with a revision number.
    A snapshot older than the last one rendered is dropped, so only the most
    recent selection ever reaches the sink. Pipeline errors end the current
    pass only: they are reported on `status` and leave the record store and
    the previous view state untouched.
    """

    def __init__(
            self,
            store: RecordStore,
            sink: Optional[RenderSink] = None,
            policy: RangePolicy = RangePolicy(),
            view_state: Optional[ViewState] = None,
            last_revision: int = -1,
    ) -> None:
        self.store = store
        self.sink = sink
        self.policy = policy
        self.view_state = view_state
        self.last_revision = last_revision
        self.result: Optional[PipelineResult] = None
        self.status: Status = store.status

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------
    def load(self, source) -> bool:
        ok = self.store.load(source)
        self.status = self.store.status
        return ok

    async def load_async(self, source) -> bool:
        ok = await self.store.load_async(source)
        self.status = self.store.status
        return ok

    # ------------------------------------------------------------------
    # Pipeline pass
    # ------------------------------------------------------------------
    def is_stale(self, state: ExploreState) -> bool:
        """True if a newer snapshot has already been rendered."""
        return state.revision < self.last_revision

    def apply(self, state: ExploreState) -> Optional[PipelineResult]:
        """
        Run one pipeline pass for a control snapshot and render it.

        :param state: filters + axes + revision
        :return: the pipeline result, or None if the snapshot was stale or failed
        """
        if self.is_stale(state):
            logger.info(
                "Dropping stale snapshot",
                extra={"revision": state.revision, "last_revision": self.last_revision},
            )
            return None

        try:
            result = run_pipeline(
                self.store.records, state.filters, state.axes, self.store.schema, self.policy
            )
        except SchemaError as e:
            self.status = Status("error", f"Invalid axis selection: {e}")
            logger.warning("Render skipped: schema error", extra={"error": str(e), "axes": state.axes.to_dict()})
            return None
        except NoDataError:
            self.status = Status("warning", "No data points match the current filters.")
            logger.info("Render skipped: no data", extra={"revision": state.revision})
            return None

        if self.view_state is None:
            new_view = ViewState.initial(result.full_range, state.axes)
        else:
            new_view = self.view_state.rebase(result.full_range, state.axes)

        self.result = result
        self.view_state = new_view
        self.last_revision = state.revision
        self.status = Status("info", f"Displayed {len(result.filtered)} points (filtered).")

        self._render()
        return result

    # ------------------------------------------------------------------
    # Zoom (never re-filters)
    # ------------------------------------------------------------------
    def zoom(self, factor: float) -> Optional[ViewState]:
        if self.view_state is None:
            return None
        self.view_state = self.view_state.zoom(factor)
        self._render()
        return self.view_state

    def zoom_in(self) -> Optional[ViewState]:
        if self.view_state is None:
            return None
        self.view_state = self.view_state.zoom_in()
        self._render()
        return self.view_state

    def zoom_out(self) -> Optional[ViewState]:
        if self.view_state is None:
            return None
        self.view_state = self.view_state.zoom_out()
        self._render()
        return self.view_state

    def reset_zoom(self) -> Optional[ViewState]:
        if self.view_state is None:
            return None
        self.view_state = self.view_state.reset_zoom()
        self._render()
        return self.view_state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def axis_labels(self, axes: Optional[AxisSelection] = None) -> Tuple[str, str]:
        axes = axes or (self.view_state.axes if self.view_state else None)
        if axes is None:
            return "", ""
        return field_label(axes.x), field_label(axes.y)

    def _render(self) -> None:
        if self.sink is None or self.result is None or self.view_state is None:
            return
        self.sink(self.result.groups, self.view_state.display_range, self.axis_labels())
