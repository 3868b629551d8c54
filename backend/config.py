"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = int(os.getenv("PORT", "3000"))

        # Sportradar
        self.sr_api_key: str | None = os.getenv("SR_API_KEY")
        self.sr_base_url: str = os.getenv("SR_BASE_URL", "https://api.sportradar.com")
        self.sr_soccer_base: str = os.getenv("SR_SOCCER_BASE", "/soccer/trial/v4/es")
        self.upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10"))
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "30"))

        # Proxy clients
        self.proxy_api_key: str | None = os.getenv("PROXY_API_KEY")
        self.rate_limit: str = os.getenv("RATE_LIMIT", "120/minute")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars."""
        required = ["SR_API_KEY", "PROXY_API_KEY"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    return env_var.lower()
