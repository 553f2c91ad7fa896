# pgfunction/services/db_config.py
from __future__ import annotations

from typing import Dict

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import psycopg
from psycopg.conninfo import make_conninfo

from pgfunction.errors import ConfigurationError
from pgfunction.models.schemas import DatabaseConfig

REDACTED = "***"

# Feld -> (Hauptname, Name aus dem alten Dev-Deployment)
ENV_NAMES: Dict[str, tuple[str, str]] = {
    "host": ("DB_HOST", "DB_HOST_DEV"),
    "port": ("DB_PORT", "DB_PORT_DEV"),
    "dbname": ("DB_NAME", "DB_NAME_DEV"),
    "user": ("DB_USER", "DB_USER_DEV"),
    "password": ("DB_PASSWORD", "DB_PASSWORD_DEV"),
}

def _env(field: str) -> AliasChoices:
    return AliasChoices(*ENV_NAMES[field])

class DatabaseSettings(BaseSettings):
    # Nur Prozess-Umgebung; .env wird separat von pgfunction.env geladen.
    # Leere Werte zählen als nicht gesetzt, DB_HOST="" fällt also auf DB_HOST_DEV zurück
    model_config = SettingsConfigDict(
        env_file=None,
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field("", validation_alias=_env("host"))
    port: str = Field("", validation_alias=_env("port"))
    dbname: str = Field("", validation_alias=_env("dbname"))
    user: str = Field("", validation_alias=_env("user"))
    password: str = Field("", validation_alias=_env("password"))

def load_database_config() -> DatabaseConfig:
    """
    Liest die fünf Verbindungswerte aus der Umgebung.
    Fehlt einer oder ist er leer -> ConfigurationError mit allen fehlenden Namen.
    """
    raw = DatabaseSettings()
    values = raw.model_dump()
    missing = [ENV_NAMES[name][0] for name, value in values.items() if not value]
    if missing:
        raise ConfigurationError(missing)
    return DatabaseConfig(**values)

def check_port(port: str) -> None:
    """
    libpq prüft den Port erst beim Verbinden (im Pool-Worker). Hier vorher,
    damit ein kaputter Wert sofort scheitert. Mehrere Hosts: "5432,5433".
    """
    for part in port.split(","):
        part = part.strip()
        if not part.isdigit() or not 0 < int(part) <= 65535:
            raise psycopg.ProgrammingError(
                f'invalid integer value "{port}" for connection option "port"'
            )

def build_conninfo(config: DatabaseConfig) -> str:
    """libpq key/value descriptor; make_conninfo quotes values and validates the result."""
    check_port(config.port)
    return make_conninfo(
        host=config.host,
        port=config.port,
        dbname=config.dbname,
        user=config.user,
        password=config.password,
    )

def redacted_conninfo(config: DatabaseConfig) -> str:
    return make_conninfo(
        host=config.host,
        port=config.port,
        dbname=config.dbname,
        user=config.user,
        password=REDACTED,
    )
