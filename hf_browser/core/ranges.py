from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .exceptions import NoDataError
from .series import SeriesGroup

PAD_FRACTION = 0.05
DEGENERATE_PAD = 1.0


@dataclass(frozen=True)
class AxisRange:
    """Closed interval [lo, hi] on one axis; always lo < hi."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lo) and math.isfinite(self.hi)):
            raise ValueError(f"Axis range bounds must be finite, got [{self.lo}, {self.hi}]")
        if not self.lo < self.hi:
            raise ValueError(f"Axis range must satisfy lo < hi, got [{self.lo}, {self.hi}]")

    @property
    def mid(self) -> float:
        return (self.lo + self.hi) / 2

    @property
    def span(self) -> float:
        return self.hi - self.lo

    def as_list(self) -> List[float]:
        return [self.lo, self.hi]


@dataclass(frozen=True)
class ViewRange:
    x: AxisRange
    y: AxisRange

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x.as_list(), "y": self.y.as_list()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewRange:
        x_lo, x_hi = data["x"]
        y_lo, y_hi = data["y"]
        return cls(x=AxisRange(float(x_lo), float(x_hi)), y=AxisRange(float(y_lo), float(y_hi)))


@dataclass(frozen=True)
class RangePolicy:
    """
    Presentation options for the full-data range.

    - y_to_zero: start the Y axis at 0 when every Y value is non-negative
    """

    y_to_zero: bool = False


def padded_range(values: Sequence[float]) -> AxisRange:
    """
    [min - pad, max + pad] with pad = 5% of the span, or 1 when the span is 0.

    :raises NoDataError: if values is empty
    """
    if len(values) == 0:
        raise NoDataError("No values to compute a range from.")
    arr = np.asarray(values, dtype=float)
    lo = float(arr.min())
    hi = float(arr.max())
    pad = (hi - lo) * PAD_FRACTION if hi > lo else DEGENERATE_PAD
    return AxisRange(lo - pad, hi + pad)


def _flatten(groups: Iterable[SeriesGroup]) -> Tuple[List[float], List[float]]:
    xs: List[float] = []
    ys: List[float] = []
    for group in groups:
        xs.extend(group.xs)
        ys.extend(group.ys)
    return xs, ys


def compute_full_range(groups: Iterable[SeriesGroup], policy: RangePolicy = RangePolicy()) -> ViewRange:
    """
    Full-data axis bounds over every point of every group, padded.

    :param groups: output of build_series
    :param policy: presentation options (Y starting at zero)
    :return: the FullRange used as the zoom reset baseline
    :raises NoDataError: if the groups hold no points
    """
    xs, ys = _flatten(groups)
    if not xs:
        raise NoDataError("No data points match the current filters and axes.")

    x_range = padded_range(xs)
    y_range = padded_range(ys)

    if policy.y_to_zero and min(ys) >= 0 and y_range.hi > 0:
        y_range = AxisRange(0.0, y_range.hi)

    return ViewRange(x=x_range, y=y_range)
