"""
Single place for value coercion.

The filter engine, series builder and loader all go through these helpers so
"1", 1, 1.0 and True are treated the same everywhere.
"""
from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

_TRUE_STRINGS = {"1", "1.0", "true"}
_FALSE_STRINGS = {"0", "0.0", "false"}

_SEX_ALIASES = {
    "female": "Female",
    "f": "Female",
    "0": "Female",
    "male": "Male",
    "m": "Male",
    "1": "Male",
}

_OUTCOME_ALIASES = {
    "survived": "Survived",
    "alive": "Survived",
    "0": "Survived",
    "died": "Died",
    "dead": "Died",
    "deceased": "Died",
    "1": "Died",
}


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a raw cell to a finite float.

    Returns None ("absent") for missing, non-numeric or non-finite input so an
    invalid cell is never plotted as 0. Booleans are not numbers here.
    """
    if is_missing(value) or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def is_true_flag(value: Any) -> bool:
    """
    Equivalence-to-true for 0/1 condition flags.

    True for boolean True, numeric 1 and the strings "1"/"true"; everything
    else (including None and 2) is False.
    """
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        if value.strip().lower() in _TRUE_STRINGS:
            return True
    return to_number(value) == 1.0


def to_flag(value: Any) -> Optional[int]:
    """Normalise a raw flag cell to 0/1, or None when it is neither."""
    if is_true_flag(value):
        return 1
    if isinstance(value, (bool, np.bool_)):
        return 0
    if isinstance(value, str):
        return 0 if value.strip().lower() in _FALSE_STRINGS else None
    return 0 if to_number(value) == 0.0 else None


def _normalise_label(value: Any, aliases: dict) -> Optional[str]:
    if is_missing(value):
        return None
    if isinstance(value, (bool, np.bool_)):
        key = "1" if value else "0"
    else:
        number = to_number(value)
        key = str(int(number)) if number is not None and number.is_integer() else str(value)
    return aliases.get(key.strip().lower())


def normalise_sex(value: Any) -> Optional[str]:
    """Map a raw sex cell ("female", "M", 1, ...) to "Female"/"Male" or None."""
    return _normalise_label(value, _SEX_ALIASES)


def normalise_outcome(value: Any) -> Optional[str]:
    """Map a raw outcome cell ("Died", 1, ...) to "Survived"/"Died" or None."""
    return _normalise_label(value, _OUTCOME_ALIASES)
