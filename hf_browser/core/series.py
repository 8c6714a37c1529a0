from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from .coercion import to_number
from .filter_state import AxisSelection
from .record_store import Record
from .schema import DEFAULT_SCHEMA, Schema


@dataclass(frozen=True)
class Point:
    """One plotted marker plus the hover bundle shown for it."""

    x: float
    y: float
    meta: Mapping[str, Any]


@dataclass(frozen=True)
class SeriesGroup:
    """All points of one outcome category, in record order."""

    label: str
    points: Tuple[Point, ...]

    @property
    def xs(self) -> List[float]:
        return [p.x for p in self.points]

    @property
    def ys(self) -> List[float]:
        return [p.y for p in self.points]

    def __len__(self) -> int:
        return len(self.points)


def build_series(
        records: Iterable[Record],
        axes: AxisSelection,
        schema: Schema = DEFAULT_SCHEMA,
) -> List[SeriesGroup]:
    """
    Group filtered records by outcome and turn them into coordinate series.

    Groups appear in the order their outcome is first seen in the records,
    counting records whose point is dropped. Records whose x or y is absent or
    not a finite number are dropped silently; a category left without points
    has no group at all.

    :param records: the filtered records
    :param axes: the selected X/Y fields
    :param schema: field declaration
    :return: list of SeriesGroup
    :raises SchemaError: if either axis is not a numeric schema field
    """
    x_field = schema.require_numeric(axes.x)
    y_field = schema.require_numeric(axes.y)

    grouped: Dict[str, List[Point]] = {}
    for record in records:
        outcome = record.get(schema.outcome_field)
        label = str(outcome) if outcome is not None else "Unknown"
        points = grouped.setdefault(label, [])

        x = to_number(record.get(x_field))
        y = to_number(record.get(y_field))
        if x is None or y is None:
            continue

        meta = {
            "outcome": outcome,
            "sex": record.get(schema.sex_field),
            "x_field": x_field,
            "y_field": y_field,
            x_field: x,
            y_field: y,
        }
        points.append(Point(x=x, y=y, meta=meta))

    return [
        SeriesGroup(label=label, points=tuple(points))
        for label, points in grouped.items()
        if points
    ]


def count_points(groups: Iterable[SeriesGroup]) -> int:
    return sum(len(g) for g in groups)
