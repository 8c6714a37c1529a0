from .loader import load_global_config, parse_global_config
from .model import GlobalConfig

__all__ = ["GlobalConfig", "load_global_config", "parse_global_config"]
