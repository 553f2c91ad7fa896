# pgfunction/models/schemas.py
from __future__ import annotations
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

PoolState = Literal["uninitialized", "initializing", "ready", "failed"]

class DatabaseConfig(BaseModel):
    """Die fünf Pflichtwerte für die Verbindung; wird pro Versuch frisch gelesen."""
    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    port: str = Field(..., min_length=1)
    dbname: str = Field(..., min_length=1)
    user: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, repr=False)

class PoolLimits(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_open: int = 5                  # -> ConnectionPool.max_size
    max_idle: int = 3                  # -> ConnectionPool.min_size
    max_idle_seconds: float = 300.0    # 5 Minuten -> ConnectionPool.max_idle

class PoolStatus(BaseModel):
    state: PoolState
    limits: PoolLimits
    error: Optional[str] = None
