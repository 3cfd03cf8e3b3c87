"""Configuration module -- exports Settings and load_config."""

from filmfilter.config.loader import load_config
from filmfilter.config.settings import Settings

__all__ = ["Settings", "load_config"]
