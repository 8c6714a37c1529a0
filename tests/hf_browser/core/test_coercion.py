import math

import numpy as np

from hf_browser.core.coercion import (
    is_true_flag,
    normalise_outcome,
    normalise_sex,
    to_flag,
    to_number,
)


def test_is_true_flag_accepts_all_true_representations():
    for value in (1, 1.0, "1", " 1 ", True, "true", "TRUE", np.int64(1), np.bool_(True)):
        assert is_true_flag(value), value


def test_is_true_flag_rejects_everything_else():
    for value in (0, 0.0, "0", False, None, "", "yes", "no", "yes please", 2, "2", float("nan")):
        assert not is_true_flag(value), value


def test_to_number_marks_invalid_cells_absent_not_zero():
    assert to_number("60") == 60.0
    assert to_number(" 38.5 ") == 38.5
    assert to_number(7) == 7.0

    assert to_number("") is None
    assert to_number("n/a") is None
    assert to_number(None) is None
    assert to_number(float("nan")) is None
    assert to_number(math.inf) is None
    assert to_number(True) is None


def test_to_flag():
    assert to_flag("1") == 1
    assert to_flag(0) == 0
    assert to_flag("false") == 0
    assert to_flag(False) == 0
    assert to_flag("maybe") is None
    assert to_flag("no") is None
    assert to_flag(None) is None


def test_normalise_sex_and_outcome():
    assert normalise_sex("Female") == "Female"
    assert normalise_sex("male") == "Male"
    assert normalise_sex(1) == "Male"
    assert normalise_sex("0") == "Female"
    assert normalise_sex("unknown") is None

    assert normalise_outcome("Survived") == "Survived"
    assert normalise_outcome("DIED") == "Died"
    assert normalise_outcome(1.0) == "Died"
    assert normalise_outcome("") is None
