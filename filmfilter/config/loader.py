"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  -- static defaults checked into the repo
  2. .env file           -- local developer overrides (not committed)
  3. Environment vars    -- set at deploy time

``load_config`` reads the YAML file first, then deep-merges the
environment-backed :class:`Settings` values on top.
"""

from pathlib import Path

import yaml

from filmfilter.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Environment variables (via Settings) override YAML values where keys overlap.

    Args:
        path: Path to the YAML configuration file.
        settings: Pre-built settings; a fresh ``Settings()`` is read when omitted.

    Returns:
        Fully resolved configuration dictionary.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()
    env_overrides = {
        "app": {
            "env": settings.app_env,
        },
        "api": {
            "base_url": settings.api_base_url,
            "movies_path": settings.movies_path,
            "genres_path": settings.genres_path,
            "streaming_path": settings.streaming_path,
            "request_timeout": settings.request_timeout,
        },
        "streaming": {
            "default_country": settings.default_country,
            "enrichment_concurrency": settings.enrichment_concurrency,
            "cache_ttl": settings.streaming_cache_ttl,
            "cache_size": settings.streaming_cache_size,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
