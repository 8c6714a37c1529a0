from dataclasses import dataclass, field
from pathlib import Path

from hf_browser.config.model import GlobalConfig
from hf_browser.core.ranges import RangePolicy
from hf_browser.core.record_store import RecordStore
from hf_browser.core.schema import DEFAULT_SCHEMA, Schema


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout + callback registration
    instead of module-level globals. The record store is the only mutable
    piece and is written once at startup.
    """
    config_root: Path
    global_config: GlobalConfig
    store: RecordStore
    schema: Schema = field(default=DEFAULT_SCHEMA)

    @property
    def range_policy(self) -> RangePolicy:
        return self.global_config.range_policy

    def validate(self) -> None:
        """Ensure the configured axes exist before the app starts."""
        self.schema.require_numeric(self.global_config.default_x)
        self.schema.require_numeric(self.global_config.default_y)
