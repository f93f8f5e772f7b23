"""Configuration models for readcore."""

from .config import (
    DEFAULT_CHARSET,
    SUPPORTED_PARSERS,
    Config,
    ExtractionSettings,
    FetchConfig,
    MonitoringConfig,
    SanitizerConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "DEFAULT_CHARSET",
    "SUPPORTED_PARSERS",
    "Config",
    "ExtractionSettings",
    "FetchConfig",
    "MonitoringConfig",
    "SanitizerConfig",
    "find_config_file",
    "load_config",
]
