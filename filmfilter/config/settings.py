"""Application settings loaded from environment variables via pydantic-settings.

Values are read from (highest priority first):

  1. Environment variables, e.g. ``API_BASE_URL=http://backend:8000``
  2. A ``.env`` file in the working directory
  3. The defaults declared below

Field names map to upper-cased environment variables automatically.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """filmfilter settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Backend ===
    # The catalog backend exposes /movies, /genres and /streaming.
    api_base_url: str = "http://localhost:8000"
    movies_path: str = "/movies"
    genres_path: str = "/genres"
    streaming_path: str = "/streaming"

    # === HTTP behaviour ===
    # Applied to every request; a timeout is handled like any transport error.
    request_timeout: float = 10.0
    # Upper bound on concurrent streaming lookups for one search.
    enrichment_concurrency: int = 8

    # === Streaming enrichment ===
    default_country: str = "dk"
    streaming_cache_ttl: int = 3600
    streaming_cache_size: int = 1000

    # === Static config ===
    # YAML file read by build_panel; a missing file means built-in defaults.
    config_path: str = "config/config.yaml"

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    def endpoint(self, path: str) -> str:
        """Join *path* onto ``api_base_url`` without doubling slashes."""
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"
