"""
Application configuration loaded from environment variables.

Uses pydantic-settings for type-safe env var parsing with automatic
.env file loading. The catalog API token is injected via environment,
never hard-coded.

To extend: add new fields here and document them in .env.example.
See https://docs.pydantic.dev/latest/concepts/pydantic_settings/
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── Core ──────────────────────────────────────────────────────
    environment: str = "development"
    debug: bool = False

    # ─── Catalog API ───────────────────────────────────────────────
    # Base URL of the cultural-heritage catalog (events, provinces, cultures).
    catalog_api_url: str = "http://localhost:8080/api"
    catalog_api_token: str = ""
    catalog_timeout_seconds: float = 10.0

    # When True, the dashboard reads the in-memory seed catalog instead of
    # calling the catalog API. Always True in tests and local dev.
    catalog_mock_mode: bool = True

    # Endpoint paths relative to catalog_api_url.
    events_path: str = "/event"
    provinces_path: str = "/provinsi"
    cultures_path: str = "/budaya"

    # Envelope keys: each endpoint answers {"<key>": {"data": [...]}}.
    events_key: str = "event"
    provinces_key: str = "provinsi"
    cultures_key: str = "budaya"

    # ─── Dashboard ─────────────────────────────────────────────────
    placeholder_image: str = "/placeholder.svg?height=400&width=800"
    slice_limit: int = 4
    refresh_rate_limit: str = "30/minute"

    # ─── CORS ──────────────────────────────────────────────────────
    # Comma-separated allowed origins for the dashboard front-end.
    cors_origins_str: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Don't fail on unknown env vars
    )


# Module-level singleton — import this everywhere instead of instantiating Settings()
settings = Settings()
