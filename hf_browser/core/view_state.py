from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .filter_state import AxisSelection
from .ranges import AxisRange, ViewRange

logger = logging.getLogger(__name__)

ZOOM_IN_FACTOR = 0.8
ZOOM_OUT_FACTOR = 1.25

# Smallest display span allowed, as a fraction of the full span
MIN_SPAN_FRACTION = 1e-9
# Largest display span allowed, as a multiple of the full span
MAX_SPAN_FACTOR = 1e9


@dataclass(frozen=True)
class ViewState:
    """
    Currently displayed axis window plus the full-data baseline it resets to.

    Two states:
    - Full: display_range is full_range
    - Zoomed: display_range came from one or more zoom() calls

    Instances are immutable; every transition returns a new ViewState so the
    owner swaps the whole thing in one assignment.
    """

    full_range: ViewRange
    display_range: ViewRange
    axes: Optional[AxisSelection] = None
    zoomed: bool = False

    @classmethod
    def initial(cls, full_range: ViewRange, axes: Optional[AxisSelection] = None) -> ViewState:
        return cls(full_range=full_range, display_range=full_range, axes=axes, zoomed=False)

    @property
    def is_zoomed(self) -> bool:
        return self.zoomed

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def zoom(self, factor: float) -> ViewState:
        """
        Scale the display window about its centre.

        factor < 1 zooms in, factor > 1 zooms out. A result that would be
        degenerate (span collapsing to ~0 or blowing up past finite bounds) is
        refused and self is returned unchanged.

        :param factor: finite, strictly positive scale factor
        :raises ValueError: for a non-finite or non-positive factor
        """
        if not isinstance(factor, (int, float)) or not math.isfinite(factor) or factor <= 0:
            raise ValueError(f"Zoom factor must be a finite positive number, got {factor!r}")

        x = self._scaled(self.display_range.x, self.full_range.x, factor)
        y = self._scaled(self.display_range.y, self.full_range.y, factor)
        if x is None or y is None:
            logger.warning("Zoom refused: result would be degenerate", extra={"factor": factor})
            return self

        return replace(self, display_range=ViewRange(x=x, y=y), zoomed=True)

    def zoom_in(self) -> ViewState:
        return self.zoom(ZOOM_IN_FACTOR)

    def zoom_out(self) -> ViewState:
        return self.zoom(ZOOM_OUT_FACTOR)

    def reset_zoom(self) -> ViewState:
        return replace(self, display_range=self.full_range, zoomed=False)

    def rebase(self, full_range: ViewRange, axes: Optional[AxisSelection] = None) -> ViewState:
        """
        Adopt a freshly computed full range after re-filtering or an axis change.

        An axis change always resets to the new full range. With the same axes a
        zoomed window is kept while it still overlaps the new data; otherwise the
        display falls back to the new full range.
        """
        if axes != self.axes or not self.zoomed:
            return ViewState.initial(full_range, axes)

        if _overlaps(self.display_range.x, full_range.x) and _overlaps(self.display_range.y, full_range.y):
            return replace(self, full_range=full_range, axes=axes)

        return ViewState.initial(full_range, axes)

    # ------------------------------------------------------------------
    # Serialisation (dcc.Store)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "full_range": self.full_range.to_dict(),
            "display_range": self.display_range.to_dict(),
            "axes": self.axes.to_dict() if self.axes is not None else None,
            "zoomed": self.zoomed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        axes = data.get("axes")
        return cls(
            full_range=ViewRange.from_dict(data["full_range"]),
            display_range=ViewRange.from_dict(data["display_range"]),
            axes=AxisSelection.from_dict(axes) if axes else None,
            zoomed=bool(data.get("zoomed", False)),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _scaled(current: AxisRange, full: AxisRange, factor: float) -> Optional[AxisRange]:
        mid = (current.lo + current.hi) / 2
        half = (current.hi - current.lo) / 2 * factor
        lo, hi = mid - half, mid + half

        if not (math.isfinite(lo) and math.isfinite(hi)) or not lo < hi:
            return None
        span = hi - lo
        if span < full.span * MIN_SPAN_FRACTION or span > full.span * MAX_SPAN_FACTOR:
            return None
        return AxisRange(lo, hi)


def _overlaps(a: AxisRange, b: AxisRange) -> bool:
    return a.lo < b.hi and b.lo < a.hi
