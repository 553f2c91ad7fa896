# pgfunction/env.py
from __future__ import annotations

from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

from pgfunction.config import settings
from pgfunction.errors import EnvironmentFileError

log = logging.getLogger("uvicorn")

def log_execution_start(label: str) -> None:
    log.info(f"Executing {label}")

def load_environment(path: Optional[str] = None) -> None:
    """
    Lädt eine lokale .env-Datei in os.environ (nur lokale Entwicklung).
    Bereits gesetzte Variablen werden nicht überschrieben.
    """
    log_execution_start("load_environment")
    env_path = Path(path or settings.env_file)
    if not env_path.is_file():
        log.error(f"Error loading .env file: {env_path} not found")
        raise EnvironmentFileError(f"Error loading .env file: {env_path} not found")

    try:
        load_dotenv(env_path, override=False)
    except OSError as exc:
        log.error(f"Error loading .env file {env_path}: {exc}")
        raise EnvironmentFileError(f"Error loading .env file: {exc}") from exc

    log.info("Local environment variables successfully loaded")
