from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import SchemaError


@dataclass(frozen=True)
class Schema:
    """
    Static declaration of the dataset's fields.

    Fields:

    - numeric_fields: columns that may be used as scatter axes
    - sex_field / sex_values: categorical sex column and its vocabulary
    - outcome_field / outcome_values: categorical outcome column and its vocabulary
    - condition_flags: logical flag name -> 0/1 column name
    - raw_sex_field / raw_outcome_field: numeric columns the labels are derived
      from when a dataset ships without the label columns

    Instances are read-only; build a new one instead of changing fields.
    """

    numeric_fields: Tuple[str, ...]
    sex_field: str = "sex_label"
    sex_values: Tuple[str, ...] = ("Female", "Male")
    outcome_field: str = "death_label"
    outcome_values: Tuple[str, ...] = ("Survived", "Died")
    condition_flags: Dict[str, str] = field(default_factory=dict)

    raw_sex_field: Optional[str] = "sex"
    raw_outcome_field: Optional[str] = "DEATH_EVENT"

    @property
    def flag_names(self) -> Tuple[str, ...]:
        return tuple(self.condition_flags.keys())

    @property
    def field_names(self) -> Tuple[str, ...]:
        """Every field an ingested record carries, in a stable order."""
        names = list(self.numeric_fields)
        names.append(self.sex_field)
        names.append(self.outcome_field)
        for column in self.condition_flags.values():
            if column not in names:
                names.append(column)
        return tuple(names)

    def is_numeric(self, name: str) -> bool:
        return name in self.numeric_fields

    def require_numeric(self, name: Optional[str]) -> str:
        """
        Guard for axis selection: the field must be a declared numeric field.

        :raises SchemaError: if name is missing, unknown or categorical
        """
        if not name:
            raise SchemaError("No axis field selected.")
        if name not in self.numeric_fields:
            raise SchemaError(
                f"Field '{name}' is not a numeric field. "
                f"Available: {list(self.numeric_fields)}"
            )
        return name

    def flag_column(self, flag: str) -> Optional[str]:
        """Column name for a logical flag, or None if the flag is unknown."""
        return self.condition_flags.get(flag)


DEFAULT_SCHEMA = Schema(
    numeric_fields=(
        "age",
        "creatinine_phosphokinase",
        "ejection_fraction",
        "platelets",
        "serum_creatinine",
        "serum_sodium",
        "time",
    ),
    condition_flags={
        "anaemia": "anaemia",
        "diabetes": "diabetes",
        "high_blood_pressure": "high_blood_pressure",
        "smoking": "smoking",
    },
)


def field_label(name: str) -> str:
    """Human-readable label for a column: underscores become spaces."""
    return name.replace("_", " ")
