"""Configuration models, loading and the rule gate."""

from .config import (
    Config,
    FetchConfig,
    MonitoringConfig,
    ScanConfig,
    find_config_file,
    is_rule_enabled,
    load_config,
)

__all__ = [
    "Config",
    "FetchConfig",
    "MonitoringConfig",
    "ScanConfig",
    "find_config_file",
    "is_rule_enabled",
    "load_config",
]
