from typing import Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    # Ignore unrelated env vars; DB_* belong to the per-attempt DatabaseSettings
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: str = "pgfunction"
    log_level: LogLevel = "INFO"
    env_file: str = ".env"
    ping_timeout: float = 30.0         # seconds, psycopg_pool default
    host: str = "127.0.0.1"            # local runner only
    port: int = 8080

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @field_validator("ping_timeout")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("ping_timeout must be > 0")
        return v

settings = Settings()
