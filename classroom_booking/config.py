"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./data/classroom_booking.db"
    conn_max_lifetime: int = 180
    max_open_conns: int = 10
    max_idle_conns: int = 10
    query_timeout: float = 3.0
    create_schema: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BOOKING_", env_file=".env", env_file_encoding="utf-8"
    )


def get_settings() -> Settings:
    return Settings()
