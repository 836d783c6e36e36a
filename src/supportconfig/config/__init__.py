"""Configuration loading for the report splitter."""

from supportconfig.config.splitter import (
    DEFAULT_CONFIG_PATH,
    SplitterConfig,
    load_splitter_config,
)

__all__ = ["DEFAULT_CONFIG_PATH", "SplitterConfig", "load_splitter_config"]
