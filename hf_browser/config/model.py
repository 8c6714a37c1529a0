from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hf_browser.core.ranges import RangePolicy


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - data_file: dataset CSV, already resolved against data_root / the config root
    - default_x / default_y: initial axis fields
    - y_to_zero: start the Y axis at 0 for non-negative data
    """

    ui_title: str
    data_file: Path
    default_x: str = "serum_sodium"
    default_y: str = "age"
    subtitle: str = "Heart Failure Clinical Records Explorer"
    y_to_zero: bool = False
    data_root: Optional[Path] = None

    @property
    def range_policy(self) -> RangePolicy:
        return RangePolicy(y_to_zero=self.y_to_zero)
