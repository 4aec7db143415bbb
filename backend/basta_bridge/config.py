"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings."""

    app_name: str = "basta-bridge"
    host: str = "0.0.0.0"
    port: int = 3001
    redis_url: str = "redis://localhost:6379"
    redis_socket_timeout_seconds: float = 5.0
    redis_health_timeout_seconds: float = 1.0
    sale_id: str = "test"
    channel_prefix: str = "agent:events"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def publish_channel(self) -> str:
        return f"{self.channel_prefix}:{self.sale_id}"


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()
