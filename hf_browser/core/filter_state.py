from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional

from .schema import Schema


def _frozen(values: Optional[Iterable[Any]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    return frozenset(str(v) for v in values)


@dataclass(frozen=True)
class FilterConfig:
    """
    Snapshot of the active filter selections.

    Fields:

    - allowed_sex: sex labels to keep. Empty means nothing is shown.
    - allowed_outcome: outcome labels to keep. Empty means nothing is shown.
    - required_flags: condition flags whose "require true" toggle is on.
      Flags not listed impose no constraint.

    A FilterConfig is rebuilt from the controls on every change and never
    mutated, so it can be passed through the pipeline by value.
    """

    allowed_sex: FrozenSet[str] = field(default_factory=frozenset)
    allowed_outcome: FrozenSet[str] = field(default_factory=frozenset)
    required_flags: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def allow_all(cls, schema: Schema) -> FilterConfig:
        return cls(
            allowed_sex=frozenset(schema.sex_values),
            allowed_outcome=frozenset(schema.outcome_values),
            required_flags=frozenset(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allowed_sex": sorted(self.allowed_sex),
            "allowed_outcome": sorted(self.allowed_outcome),
            "required_flags": sorted(self.required_flags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterConfig:
        return cls(
            allowed_sex=_frozen(data.get("allowed_sex")),
            allowed_outcome=_frozen(data.get("allowed_outcome")),
            required_flags=_frozen(data.get("required_flags")),
        )


@dataclass(frozen=True)
class AxisSelection:
    """The two numeric fields plotted on X and Y."""

    x: str
    y: str

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AxisSelection:
        return cls(x=data.get("x"), y=data.get("y"))


@dataclass(frozen=True)
class ExploreState:
    """
    Everything one pipeline pass needs from the controls.

    revision increases by one for every control change; the render side uses
    it to drop snapshots older than the one it already drew.
    """

    filters: FilterConfig
    axes: AxisSelection
    revision: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": self.filters.to_dict(),
            "axes": self.axes.to_dict(),
            "revision": self.revision,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ExploreState:
        return cls(
            filters=FilterConfig.from_dict(data.get("filters") or {}),
            axes=AxisSelection.from_dict(data.get("axes") or {}),
            revision=int(data.get("revision", 0)),
        )
